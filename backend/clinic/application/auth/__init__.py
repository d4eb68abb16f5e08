from .admin_session import AdminSession, parse_session_record
from .create_admin import create_admin
