from flask import request, jsonify, current_app
from clinic.domain.invariants.exceptions import ClinicError
from clinic.services.email_delivery import send_template_email
from . import functions_bp


def _failure(message):
    return jsonify({"success": False, "error": message}), 500


@functions_bp.route("/send-otp", methods=["POST", "OPTIONS"])
def send_otp():
    if request.method == "OPTIONS":
        return "", 200

    current_app.logger.info("OTP email function called")
    data = request.get_json(silent=True) or {}
    email = data.get("email")
    otp = data.get("otp")

    if not email or not otp:
        return _failure("Email and OTP are required")

    try:
        details = send_template_email("otp", to=email, props={"otp": otp})
    except ClinicError as exc:
        current_app.logger.error("Error in send-otp function: %s", exc)
        return _failure(str(exc))

    return jsonify({
        "success": True,
        "message": "OTP email sent successfully",
        "details": details
    }), 200


@functions_bp.route("/send-email", methods=["POST", "OPTIONS"])
def send_email():
    if request.method == "OPTIONS":
        return "", 200

    data = request.get_json(silent=True) or {}
    template = data.get("template")
    email = data.get("email")
    props = data.get("props") or {}

    if not template or not email:
        return _failure("Template and email are required")
    if not isinstance(props, dict):
        return _failure("Template props must be an object")

    try:
        details = send_template_email(template, to=email, props=props)
    except ClinicError as exc:
        current_app.logger.error("Error in send-email function: %s", exc)
        return _failure(str(exc))

    return jsonify({
        "success": True,
        "message": "Email sent successfully",
        "details": details
    }), 200
