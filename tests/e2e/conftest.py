"""Fixtures for end-to-end tests.

The app runs on the mock container: in-memory persistence, storage and email.
"""

import pytest
from fastapi.testclient import TestClient

from scribe.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def container():
    """Test container shared by every request of one test."""
    return build_test_container()


@pytest.fixture
def client(container):
    """Create test client."""
    with TestClient(create_app(container)) as test_client:
        yield test_client


@pytest.fixture
def sign_up(client):
    """Create an account, log in, and return its id and auth headers."""

    def _sign_up(username: str = "alice", password: str = "secret") -> dict:
        email = f"{username}@example.com"
        created = client.post(
            "/users",
            json={"username": username, "email": email, "password": password},
        )
        assert created.status_code == 201, created.text

        login = client.post("/auth/login", json={"email": email, "password": password})
        assert login.status_code == 200, login.text
        token = login.json()["token"]
        return {
            "id": created.json()["user_id"],
            "token": token,
            "headers": {"Authorization": f"Bearer {token}"},
        }

    return _sign_up
