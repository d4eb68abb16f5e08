# clinic/application/auth/admin_session.py
from __future__ import annotations

import json
from typing import MutableMapping, Optional

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from clinic.models.admin_credential import AdminCredential
from clinic.domain.invariants.exceptions import SessionParseError


def parse_session_record(raw) -> str:
    """
    Decode the persisted {"username": ...} record.
    Raises SessionParseError for anything else.
    """
    try:
        data = json.loads(raw) if isinstance(raw, (str, bytes)) else raw
        username = data["username"]
    except (TypeError, ValueError, KeyError) as exc:
        raise SessionParseError(f"Malformed session record: {raw!r}") from exc

    if not isinstance(username, str) or not username:
        raise SessionParseError(f"Malformed session record: {raw!r}")
    return username


class AdminSession:
    """
    Admin login state for one request.

    The only persisted part is a single key in ``store`` (the Flask session
    cookie) holding ``{"username": ...}``. Its presence means logged in
    until logout clears it.
    """

    def __init__(self, store: MutableMapping, key: Optional[str] = None) -> None:
        self._store = store
        self._key = key or current_app.config.get("AUTH_SESSION_KEY", "eyefem_auth")
        self.username: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self.username is not None

    @classmethod
    def init(cls, store: MutableMapping, key: Optional[str] = None) -> "AdminSession":
        session = cls(store, key)
        session.restore()
        return session

    def restore(self) -> None:
        raw = self._store.get(self._key)
        if raw is None:
            return

        try:
            self.username = parse_session_record(raw)
        except SessionParseError as exc:
            current_app.logger.warning("Error parsing auth data: %s", exc)
            self._store.pop(self._key, None)
            self.username = None

    def login(self, username: str, password: str) -> bool:
        if not username or not password:
            return False

        try:
            credential = AdminCredential.query.filter_by(username=username).first()
        except SQLAlchemyError as exc:
            current_app.logger.error("Error fetching password: %s", exc)
            return False

        if credential is None or not credential.check_password(password):
            return False

        self.username = username
        self._store[self._key] = json.dumps({"username": username})
        return True

    def logout(self) -> None:
        self.username = None
        self._store.pop(self._key, None)

    def teardown(self) -> None:
        """Drop in-memory state at the end of a request; the record stays."""
        self.username = None
        self._store = {}
