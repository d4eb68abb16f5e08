from functools import wraps
from flask import g, jsonify, request, redirect, url_for, flash, current_app
from flask_jwt_extended import verify_jwt_in_request, get_jwt_identity
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError


def current_admin():
    """Username of the logged-in admin: session cookie first, then bearer token."""
    admin_session = g.get("admin_session")
    if admin_session is not None and admin_session.is_authenticated:
        return admin_session.username

    try:
        verify_jwt_in_request(optional=True)
    except (JWTExtendedException, PyJWTError) as exc:
        # A bad token counts as no token
        current_app.logger.info("Ignoring invalid bearer token: %s", exc)
        return None
    return get_jwt_identity()


def _wants_json():
    return request.path.startswith("/api/") or request.is_json


def admin_required(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        if current_admin():
            return fn(*args, **kwargs)

        login_url = url_for("site.admin_login")
        if _wants_json():
            return jsonify({
                "error": "Authentication Required",
                "redirect": login_url
            }), 401

        flash("Authentication Required: Please login to access this page", "error")
        return redirect(login_url)
    return wrapper
