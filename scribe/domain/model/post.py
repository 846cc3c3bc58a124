"""Post aggregate root."""

from datetime import datetime

from pydantic import Field

from scribe.domain.model.common import DomainModel
from scribe.domain.model.reaction import ReactionSet
from scribe.domain.value import PostId, UserId, Username


class Post(DomainModel):
    """Post aggregate root.

    The author's username is copied onto the post at creation time so
    listings never need a join.
    """

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1, max_length=50000)
    author_id: UserId
    author_username: Username
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    upvotes: ReactionSet = Field(default_factory=ReactionSet)
    downvotes: ReactionSet = Field(default_factory=ReactionSet)
