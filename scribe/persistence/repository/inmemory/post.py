"""In-memory post repository for testing."""

from typing import Any, Optional

from scribe.domain.model import Post
from scribe.domain.repository import PostRepository
from scribe.domain.value import PostId, UserId

from .store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._store.posts.get(post_id)

    async def find_all(self, limit: int = 30, offset: int = 0) -> list[Post]:
        """Find posts, newest first."""
        posts = sorted(
            self._store.posts.values(), key=lambda p: p.created_at, reverse=True
        )
        return posts[offset : offset + limit]

    async def find_by_author(
        self, author_id: UserId, limit: int = 30, offset: int = 0
    ) -> list[Post]:
        """Find posts by one author, newest first."""
        posts = [p for p in self._store.posts.values() if p.author_id == author_id]
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts[offset : offset + limit]

    async def save(self, post: Post) -> Post:
        self._store.posts[post.id] = post
        return post

    async def update_fields(
        self, post_id: PostId, fields: dict[str, Any]
    ) -> Optional[Post]:
        post = self._store.posts.get(post_id)
        if post is None:
            return None
        updated = post.model_copy(update=fields)
        self._store.posts[post_id] = updated
        return updated

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post. Comments stay in the store."""
        return self._store.posts.pop(post_id, None) is not None
