from __future__ import annotations

import pytest

from src.hrms.hrms.main import create_app


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app()


@pytest.fixture
def container(app):
    return app.extensions["hrms"]


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login(client):
    """Log in and return ready-to-use auth headers."""

    def _login(email: str, password: str) -> dict:
        resp = client.post("/api/auth/login", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.get_json()
        return {"Authorization": f"Bearer {resp.get_json()['token']}"}

    return _login


@pytest.fixture
def admin_headers(login):
    return login("admin@hrms.com", "admin123")


@pytest.fixture
def employee_headers(login):
    return login("james@hrms.com", "emp123")
