from flask import request, g, session
from clinic.application.auth import AdminSession
from clinic.utils.device import get_device_type, width_from_headers


def session_middleware(app):
    @app.before_request
    def load_admin_session():
        # Attach request-scoped auth and device state to global context
        g.admin_session = AdminSession.init(session)
        g.device_type = get_device_type(width_from_headers(request.headers))

    @app.teardown_request
    def drop_admin_session(exc):
        admin_session = g.pop("admin_session", None)
        if admin_session is not None:
            admin_session.teardown()
