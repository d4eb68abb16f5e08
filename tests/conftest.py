"""Shared fixtures: a testing app with a fresh in-memory database per test."""
from __future__ import annotations

import pytest  # type: ignore[import-not-found]

from clinic import create_app
from clinic.application.auth import create_admin
from clinic.extensions import db


@pytest.fixture
def app(tmp_path):
    app = create_app("testing")
    app.config["UPLOAD_FOLDER"] = str(tmp_path / "uploads")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def admin(app):
    return create_admin(username="admin", password="s3cret-pass")


@pytest.fixture
def admin_client(client, admin):
    resp = client.post(
        "/api/v1/auth/login",
        json={"username": "admin", "password": "s3cret-pass"},
    )
    assert resp.status_code == 200
    return client
