"""Test configuration and fixtures."""

import os
from datetime import datetime, timezone
from uuid import uuid4

# Must be set before any Settings() is built
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret-with-at-least-32-bytes!!")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")

import logfire  # noqa: E402

from scribe.domain.model import User  # noqa: E402
from scribe.domain.value import Email, UserId, Username  # noqa: E402

logfire.configure(send_to_logfire=False, console=False)


def make_user(username: str = "alice", password_hash: str = "unused") -> User:
    """Helper to build a user for tests that seed repositories directly."""
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        email=Email(f"{username}@example.com"),
        password_hash=password_hash,
        created_at=datetime.now(timezone.utc),
    )
