"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from scribe.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    sub: str
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    subject: str, settings: AuthSettings, now: datetime | None = None
) -> tuple[str, datetime]:
    """Create a JWT token for the subject.

    Args:
        subject: User ID the token asserts
        settings: Authentication settings
        now: Issuance instant (defaults to the current UTC time)

    Returns:
        Encoded JWT token and its expiry instant
    """
    issued_at = now or datetime.now(timezone.utc)
    expiry = issued_at + timedelta(hours=settings.jwt_expiry_hours)

    payload = {
        "sub": subject,
        "exp": expiry,
    }

    token = jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)

    return token, expiry


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp"]},
        )
        return TokenPayload(
            sub=payload["sub"],
            exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
