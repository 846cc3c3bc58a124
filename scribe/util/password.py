"""Password hashing utilities."""

import bcrypt


def hash_password(plaintext: str, rounds: int = 12) -> str:
    """Hash a password with bcrypt.

    Args:
        plaintext: Password as typed by the user
        rounds: bcrypt work factor

    Returns:
        Opaque digest suitable for storage
    """
    digest = bcrypt.hashpw(plaintext.encode("utf-8"), bcrypt.gensalt(rounds=rounds))
    return digest.decode("utf-8")


def verify_password(digest: str, plaintext: str) -> bool:
    """Check a password against a stored digest.

    Malformed digests never match.
    """
    try:
        return bcrypt.checkpw(plaintext.encode("utf-8"), digest.encode("utf-8"))
    except ValueError:
        return False
