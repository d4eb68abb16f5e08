from flask import request, jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError
from clinic.domain.invariants.exceptions import ClinicError
from clinic.application.holidays import import_national_holidays
from . import functions_bp


@functions_bp.route("/fetch-indian-holidays", methods=["POST", "OPTIONS"])
def fetch_indian_holidays():
    if request.method == "OPTIONS":
        return "", 200

    data = request.get_json(silent=True) or {}
    year = data.get("year")

    try:
        year = int(year) if year else None
    except (TypeError, ValueError):
        return jsonify({"success": False, "error": f"Invalid year: {year}"}), 500

    current_app.logger.info("Fetching Indian holidays for %s", year or "current year")
    try:
        result = import_national_holidays(year=year)
    except (ClinicError, SQLAlchemyError) as exc:
        current_app.logger.error("Error processing request: %s", exc)
        return jsonify({
            "success": False,
            "error": str(exc) or "An unknown error occurred"
        }), 500

    return jsonify(result), 200
