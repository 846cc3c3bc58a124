"""Shared backing store for the in-memory repositories."""

from scribe.domain.model import Comment, Post, User
from scribe.domain.value import CommentId, PostId, UserId


class InMemoryStore:
    """Plain dicts standing in for the database tables.

    Repositories built on the same store see each other's writes, the way
    PostgreSQL repositories sharing a database do.
    """

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.posts: dict[PostId, Post] = {}
        self.comments: dict[CommentId, Comment] = {}
