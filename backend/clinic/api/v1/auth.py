from flask import jsonify, g
from flask_jwt_extended import create_access_token
from clinic.utils.decorators import current_admin
from . import v1_bp, json_body


@v1_bp.route("/auth/login", methods=["POST"])
def login():
    data = json_body()
    if not data:
        return jsonify({"error": "Invalid request body"}), 400

    username = data.get("username")
    password = data.get("password")

    if not username or not password:
        return jsonify({"error": "Username and password required"}), 400

    if not g.admin_session.login(username, password):
        return jsonify({"error": "Invalid credentials"}), 401

    access_token = create_access_token(identity=username)

    return jsonify({
        "username": username,
        "access_token": access_token
    }), 200


@v1_bp.route("/auth/logout", methods=["POST"])
def logout():
    g.admin_session.logout()
    return jsonify({"message": "Logged out"}), 200


@v1_bp.route("/auth/session", methods=["GET"])
def session_status():
    username = current_admin()
    return jsonify({
        "authenticated": bool(username),
        "username": username
    }), 200
