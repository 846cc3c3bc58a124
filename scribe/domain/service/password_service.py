"""Password hashing domain service."""

import logfire

from scribe.config import AuthSettings
from scribe.util.password import hash_password, verify_password

from .base import Service


class PasswordService(Service):
    """Hashes and checks user passwords."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def hash(self, plaintext: str) -> str:
        with logfire.span("password_service.hash"):
            return hash_password(plaintext, rounds=self.auth_settings.bcrypt_rounds)

    def verify(self, digest: str, plaintext: str) -> bool:
        with logfire.span("password_service.verify"):
            return verify_password(digest, plaintext)
