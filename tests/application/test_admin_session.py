"""Tests for the admin session gate."""
from __future__ import annotations

import json

import pytest  # type: ignore[import-not-found]

from clinic.application.auth import AdminSession, create_admin, parse_session_record
from clinic.domain.invariants.exceptions import SessionParseError, ValidationError
from clinic.models import AdminCredential


def test_password_is_stored_hashed(admin):
    stored = AdminCredential.query.filter_by(username="admin").one()

    assert stored.password_hash != "s3cret-pass"
    assert stored.check_password("s3cret-pass")


def test_create_admin_resets_existing_password(admin):
    create_admin(username="admin", password="new-pass")

    assert AdminCredential.query.count() == 1
    assert AdminCredential.query.one().check_password("new-pass")


def test_create_admin_requires_both_fields(app):
    with pytest.raises(ValidationError):
        create_admin(username="admin", password="")


def test_login_success_persists_record(admin):
    store = {}
    session = AdminSession.init(store)

    assert session.login("admin", "s3cret-pass") is True
    assert session.is_authenticated
    assert json.loads(store["eyefem_auth"]) == {"username": "admin"}


def test_login_wrong_password(admin):
    store = {}
    session = AdminSession.init(store)

    assert session.login("admin", "nope") is False
    assert not session.is_authenticated
    assert store == {}


def test_login_unknown_user(admin):
    session = AdminSession.init({})

    assert session.login("intruder", "s3cret-pass") is False


def test_record_restores_login(app):
    store = {"eyefem_auth": json.dumps({"username": "admin"})}

    session = AdminSession.init(store)

    assert session.is_authenticated
    assert session.username == "admin"


def test_malformed_record_is_purged(app, caplog):
    store = {"eyefem_auth": "{not json"}

    session = AdminSession.init(store)

    assert not session.is_authenticated
    assert "eyefem_auth" not in store
    assert "Error parsing auth data" in caplog.text


def test_logout_clears_record(admin):
    store = {}
    session = AdminSession.init(store)
    session.login("admin", "s3cret-pass")

    session.logout()

    assert not session.is_authenticated
    assert store == {}


def test_teardown_keeps_persisted_record(admin):
    store = {}
    session = AdminSession.init(store)
    session.login("admin", "s3cret-pass")

    session.teardown()

    assert not session.is_authenticated
    assert "eyefem_auth" in store
    assert AdminSession.init(store).username == "admin"


@pytest.mark.parametrize("raw", ["[]", '{"user": "x"}', '{"username": ""}', "null"])
def test_parse_session_record_rejects_bad_shapes(raw):
    with pytest.raises(SessionParseError):
        parse_session_record(raw)
