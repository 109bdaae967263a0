"""
Tests for application startup.

These run the real lifespan (TestClient as a context manager):
tables are created in a fresh database, the configured admin is
ensured, and the routes use the Settings the app was built with.
"""

import pytest
from fastapi.testclient import TestClient

from expense_tracker.config import Settings, get_settings
from expense_tracker.main import create_app
from expense_tracker.security import create_session_token


@pytest.fixture
def app_settings(tmp_path):
    settings = Settings()
    settings.DATABASE_URL = f"sqlite:///{tmp_path / 'startup.db'}"
    settings.SECRET_KEY = "startup-secret"
    settings.ADMIN_EMAIL = "root@test.com"
    settings.ADMIN_PASSWORD = "rootpass"
    settings.ADMIN_NAME = "Root"
    settings.ENVIRONMENT = "staging"
    return settings


def login_admin(client):
    return client.post("/auth/login", json={
        "email": "root@test.com",
        "password": "rootpass",
    })


class TestBootstrapOnStartup:

    def test_bootstrap_admin_can_log_in(self, app_settings):
        with TestClient(create_app(app_settings)) as client:
            response = login_admin(client)
            assert response.status_code == 200

            account = response.json()["account"]
            assert account["role"] == "admin"
            assert account["name"] == "Root"

            token = response.json()["token"]
            me = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
            assert me.status_code == 200

    def test_restart_keeps_a_single_admin(self, app_settings):
        with TestClient(create_app(app_settings)) as client:
            assert login_admin(client).status_code == 200

        with TestClient(create_app(app_settings)) as client:
            token = login_admin(client).json()["token"]
            accounts = client.get(
                "/accounts", headers={"Authorization": f"Bearer {token}"}
            ).json()["accounts"]

        assert [a["email"] for a in accounts] == ["root@test.com"]


class TestAppSettings:

    def test_tokens_are_signed_with_the_app_secret(self, app_settings):
        with TestClient(create_app(app_settings)) as client:
            account = login_admin(client).json()["account"]

            foreign = create_session_token(
                get_settings().SECRET_KEY, account["id"], account["email"]
            )
            response = client.get(
                "/auth/me", headers={"Authorization": f"Bearer {foreign}"}
            )
            assert response.status_code == 401

            own = create_session_token(
                app_settings.SECRET_KEY, account["id"], account["email"]
            )
            response = client.get("/auth/me", headers={"Authorization": f"Bearer {own}"})
            assert response.status_code == 200

    def test_health_reports_app_environment(self, app_settings):
        with TestClient(create_app(app_settings)) as client:
            data = client.get("/health").json()

        assert data["environment"] == "staging"
        assert data["database"] == "healthy"
