"""End-to-end tests for signup, signin and profiles."""

import pytest
from fastapi.testclient import TestClient

from penpixel.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by in-memory repositories."""
    app_instance = create_app(build_test_container())
    return TestClient(app_instance)


def signup(client, fullname="Grace Hopper", email="grace@example.com", password="Cobol1959"):
    return client.post(
        "/auth/signup",
        json={"fullname": fullname, "email": email, "password": password},
    )


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


class TestAuthFlow:
    """End-to-end tests for email and password authentication."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_signup_then_signin(self, client):
        """Should create an account and sign back in with it."""
        # Act
        created = signup(client)
        signed_in = client.post(
            "/auth/signin", json={"email": "grace@example.com", "password": "Cobol1959"}
        )

        # Assert
        assert created.status_code == 201
        assert created.json()["username"] == "grace"
        assert signed_in.status_code == 200
        assert signed_in.json()["user_id"] == created.json()["user_id"]

    def test_duplicate_email_is_conflict(self, client):
        signup(client)

        response = signup(client, fullname="Another Grace")

        assert response.status_code == 409

    def test_weak_password_is_bad_request(self, client):
        response = signup(client, password="password")

        assert response.status_code == 400

    def test_overlong_email_is_rejected(self, client):
        response = signup(client, email="a" * 250 + "@example.com")

        assert response.status_code == 422

    def test_wrong_password_is_unauthorized(self, client):
        signup(client)

        response = client.post(
            "/auth/signin", json={"email": "grace@example.com", "password": "Nope12345"}
        )

        assert response.status_code == 401

    def test_change_password_requires_token(self, client):
        # Arrange
        token = signup(client).json()["access_token"]
        body = {"current_password": "Cobol1959", "new_password": "Fortran57"}

        # Act
        anonymous = client.post("/auth/change-password", json=body)
        garbage = client.post(
            "/auth/change-password", json=body, headers=bearer("not-a-token")
        )
        changed = client.post("/auth/change-password", json=body, headers=bearer(token))

        # Assert
        assert anonymous.status_code == 401
        assert anonymous.headers["WWW-Authenticate"] == "Bearer"
        assert garbage.status_code == 401
        assert changed.status_code == 200
        signed_in = client.post(
            "/auth/signin", json={"email": "grace@example.com", "password": "Fortran57"}
        )
        assert signed_in.status_code == 200


class TestProfileFlow:
    """End-to-end tests for profiles."""

    def test_edit_and_view_profile(self, client):
        # Arrange
        token = signup(client).json()["access_token"]

        # Act
        updated = client.patch(
            "/users/me",
            json={
                "username": "amazing_grace",
                "bio": "Navy admiral",
                "social_links": {"github": "https://github.com/grace"},
            },
            headers=bearer(token),
        )
        profile = client.get("/users/amazing_grace")
        old = client.get("/users/grace")
        search = client.get("/users/search", params={"query": "amaz"})

        # Assert
        assert updated.status_code == 200
        assert profile.status_code == 200
        assert profile.json()["bio"] == "Navy admiral"
        assert profile.json()["social_links"]["github"] == "https://github.com/grace"
        assert old.status_code == 404
        assert [u["username"] for u in search.json()["users"]] == ["amazing_grace"]

    def test_taken_username_is_conflict(self, client):
        # Arrange
        signup(client, email="ada@example.com", fullname="Ada Lovelace")
        token = signup(client).json()["access_token"]

        # Act
        response = client.patch(
            "/users/me", json={"username": "ada"}, headers=bearer(token)
        )

        # Assert
        assert response.status_code == 409
