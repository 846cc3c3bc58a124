"""Comment entity and its replies.

Comments attach to a post. Replies are one level deep and owned by their
comment: they are created through the comment, addressed by
(comment id, reply id), and removed with it.
"""

from datetime import datetime

from pydantic import Field

from scribe.domain.model.common import DomainModel
from scribe.domain.model.reaction import ReactionSet
from scribe.domain.value import CommentId, PostId, ReplyId, UserId, Username


class Reply(DomainModel):
    """Reply nested under a comment."""

    id: ReplyId
    author_id: UserId
    author_username: Username
    content: str = Field(min_length=1, max_length=10000)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    likes: ReactionSet = Field(default_factory=ReactionSet)
    dislikes: ReactionSet = Field(default_factory=ReactionSet)


class Comment(DomainModel):
    """Comment on a post.

    ``replies`` is ordered by creation time.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    author_username: Username
    content: str = Field(min_length=1, max_length=10000)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    likes: ReactionSet = Field(default_factory=ReactionSet)
    dislikes: ReactionSet = Field(default_factory=ReactionSet)
    replies: list[Reply] = Field(default_factory=list)

    def find_reply(self, reply_id: ReplyId) -> Reply | None:
        return next((r for r in self.replies if r.id == reply_id), None)
