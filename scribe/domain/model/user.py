"""User aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from scribe.domain.model.common import DomainModel
from scribe.domain.value import Email, UserId, Username


class User(DomainModel):
    """User aggregate root.

    Users sign in with email and password. A pending password recovery is
    represented by ``recovery_code`` and the instant it was issued.
    """

    id: UserId
    username: Username
    email: Email
    password_hash: str = Field(repr=False)
    avatar_url: Optional[str] = None
    recovery_code: Optional[str] = Field(default=None, repr=False)
    recovery_code_issued_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
