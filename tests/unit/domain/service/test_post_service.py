"""Unit tests for PostService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from scribe.domain.error import NotAuthorizedError, NotFoundError
from scribe.domain.model import Post
from scribe.domain.repository import CommentRepository, PostRepository
from scribe.domain.service import CommentService, PostService
from scribe.domain.value import PostId
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for create_post."""

    @pytest.mark.asyncio
    async def test_create_post_denormalizes_author(self, unit_env):
        """A new post carries its author's username and empty vote sets."""
        # Arrange
        post_service = await unit_env.get(PostService)
        author = make_user("alice")

        # Act
        post = await post_service.create_post(author, "Hello", "First post")

        # Assert
        assert post.author_id == author.id
        assert post.author_username.root == "alice"
        assert post.upvotes.count == 0
        assert post.downvotes.users == []
        assert await post_service.get_post_by_id(post.id) == post


class TestListPosts:
    """Tests for list_posts and list_posts_by_author."""

    @pytest.mark.asyncio
    async def test_newest_first_and_by_author(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        alice, bob = make_user("alice"), make_user("bob")
        start = datetime(2025, 1, 1, tzinfo=timezone.utc)
        posts = []
        for hour, author in enumerate([alice, bob, alice]):
            posts.append(
                await post_repo.save(
                    Post(
                        id=PostId(uuid4()),
                        title=f"Post {hour}",
                        content="Body",
                        author_id=author.id,
                        author_username=author.username,
                        created_at=start + timedelta(hours=hour),
                        updated_at=start + timedelta(hours=hour),
                    )
                )
            )
        first, second, third = posts

        # Act
        everything = await post_service.list_posts()
        by_alice = await post_service.list_posts_by_author(alice.id)

        # Assert
        assert [p.id for p in everything] == [third.id, second.id, first.id]
        assert [p.id for p in by_alice] == [third.id, first.id]

class TestUpdatePost:
    """Tests for update_post."""

    @pytest.mark.asyncio
    async def test_author_can_edit_title_only(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        author = make_user("alice")
        post = await post_service.create_post(author, "Draft", "Body")

        # Act
        updated = await post_service.update_post(post.id, author.id, title="Final")

        # Assert
        assert updated.title == "Final"
        assert updated.content == "Body"
        assert updated.updated_at >= post.updated_at

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self, unit_env):
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(make_user("alice"), "Draft", "Body")

        with pytest.raises(NotAuthorizedError):
            await post_service.update_post(post.id, make_user("bob").id, title="Mine")

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        post_service = await unit_env.get(PostService)
        with pytest.raises(NotFoundError):
            await post_service.update_post(
                PostId(uuid4()), make_user().id, content="x"
            )


class TestDeletePost:
    """Tests for delete_post."""

    @pytest.mark.asyncio
    async def test_delete_keeps_comments(self, unit_env):
        """Deleting a post leaves its comments in the store."""
        # Arrange
        post_service = await unit_env.get(PostService)
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        author = make_user("alice")
        post = await post_service.create_post(author, "Title", "Body")
        comment = await comment_service.create_comment(post.id, author, "Nice")

        # Act
        await post_service.delete_post(post.id, author.id)

        # Assert
        assert await post_repo.find_by_id(post.id) is None
        assert await comment_repo.find_by_id(comment.id) is not None
        assert len(await comment_repo.find_by_post(post.id)) == 1

    @pytest.mark.asyncio
    async def test_only_author_can_delete(self, unit_env):
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(make_user("alice"), "Title", "Body")

        with pytest.raises(NotAuthorizedError):
            await post_service.delete_post(post.id, make_user("bob").id)
