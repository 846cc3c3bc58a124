"""Integration tests for PostgresReactionRepository.

These run the conditional UPDATE statements against PostgreSQL, so the
membership guards, the array functions and the count CHECK constraint are
exercised for real. Set DATABASE__URL to a migrated database to run them.
"""

import os
from uuid import uuid4

import pytest

from scribe.domain.model import Comment, Post, Reply, resolve_location
from scribe.domain.repository import (
    CommentRepository,
    PostRepository,
    ReactionRepository,
    UserRepository,
)
from scribe.domain.value import CommentId, Direction, PostId, ReplyId, UserId
from tests.conftest import make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.environ.get("DATABASE__URL"),
    reason="DATABASE__URL is not set",
)

# Integration test fixture - real PostgreSQL
integration_env = create_env_fixture(unmock={"persistence"})

INC = Direction.INCREASE
DEC = Direction.DECREASE


async def seed_author(env):
    user_repo = await env.get(UserRepository)
    return await user_repo.save(make_user(f"u{uuid4().hex[:12]}"))


class TestPostReactionsIntegration:
    """Votes on a post row."""

    @pytest.mark.asyncio
    async def test_repeated_increase_counts_once(self, integration_env):
        # Arrange
        author = await seed_author(integration_env)
        post_repo = await integration_env.get(PostRepository)
        reactions = await integration_env.get(ReactionRepository)
        post = await post_repo.save(
            Post(
                id=PostId(uuid4()),
                title="Counted once",
                content="Body",
                author_id=author.id,
                author_username=author.username,
            )
        )
        location = resolve_location("post", "upvote", post.id)
        voter = UserId(uuid4())

        # Act
        first = await reactions.apply(location, voter, INC)
        second = await reactions.apply(location, voter, INC)

        # Assert
        assert first is True
        assert second is False
        stored = await post_repo.find_by_id(post.id)
        assert stored.upvotes.users == [voter]
        assert stored.upvotes.count == 1
        assert stored.downvotes.count == 0

    @pytest.mark.asyncio
    async def test_decrease_by_non_member_is_noop(self, integration_env):
        # Arrange
        author = await seed_author(integration_env)
        post_repo = await integration_env.get(PostRepository)
        reactions = await integration_env.get(ReactionRepository)
        post = await post_repo.save(
            Post(
                id=PostId(uuid4()),
                title="Untouched",
                content="Body",
                author_id=author.id,
                author_username=author.username,
            )
        )
        location = resolve_location("post", "downvote", post.id)
        member, stranger = UserId(uuid4()), UserId(uuid4())
        await reactions.apply(location, member, INC)

        # Act
        applied = await reactions.apply(location, stranger, DEC)

        # Assert
        assert applied is False
        stored = await post_repo.find_by_id(post.id)
        assert stored.downvotes.users == [member]
        assert stored.downvotes.count == 1

    @pytest.mark.asyncio
    async def test_withdraw_restores_empty_set(self, integration_env):
        # Arrange
        author = await seed_author(integration_env)
        post_repo = await integration_env.get(PostRepository)
        reactions = await integration_env.get(ReactionRepository)
        post = await post_repo.save(
            Post(
                id=PostId(uuid4()),
                title="Withdrawn",
                content="Body",
                author_id=author.id,
                author_username=author.username,
            )
        )
        location = resolve_location("post", "upvote", post.id)
        voter = UserId(uuid4())
        await reactions.apply(location, voter, INC)

        # Act
        applied = await reactions.apply(location, voter, DEC)

        # Assert
        assert applied is True
        stored = await post_repo.find_by_id(post.id)
        assert stored.upvotes.users == []
        assert stored.upvotes.count == 0

    @pytest.mark.asyncio
    async def test_missing_post_matches_nothing(self, integration_env):
        reactions = await integration_env.get(ReactionRepository)
        location = resolve_location("post", "upvote", PostId(uuid4()))

        applied = await reactions.apply(location, UserId(uuid4()), INC)

        assert applied is False
        assert await reactions.exists(location) is False


class TestReplyReactionsIntegration:
    """Likes on a reply are addressed by (comment_id, reply_id)."""

    @pytest.mark.asyncio
    async def test_reply_like_touches_only_that_reply(self, integration_env):
        # Arrange
        author = await seed_author(integration_env)
        comment_repo = await integration_env.get(CommentRepository)
        reactions = await integration_env.get(ReactionRepository)

        def reply(reply_id: ReplyId) -> Reply:
            return Reply(
                id=reply_id,
                author_id=author.id,
                author_username=author.username,
                content="A reply",
            )

        target_id, sibling_id = ReplyId(uuid4()), ReplyId(uuid4())
        c1 = await comment_repo.save(
            Comment(
                id=CommentId(uuid4()),
                post_id=PostId(uuid4()),
                author_id=author.id,
                author_username=author.username,
                content="C1",
                replies=[reply(target_id), reply(sibling_id)],
            )
        )
        # Another comment holding a reply with the same id
        c2 = await comment_repo.save(
            Comment(
                id=CommentId(uuid4()),
                post_id=c1.post_id,
                author_id=author.id,
                author_username=author.username,
                content="C2",
                replies=[reply(target_id)],
            )
        )
        liker = UserId(uuid4())

        # Act
        applied = await reactions.apply(
            resolve_location("reply", "like", c1.id, target_id), liker, INC
        )

        # Assert
        assert applied is True
        stored_c1 = await comment_repo.find_by_id(c1.id)
        stored_c2 = await comment_repo.find_by_id(c2.id)
        liked = {r.id: r for r in stored_c1.replies}
        assert liked[target_id].likes.users == [liker]
        assert liked[target_id].likes.count == 1
        assert liked[target_id].dislikes.count == 0
        assert liked[sibling_id].likes.count == 0
        assert stored_c1.likes.count == 0
        assert stored_c2.replies[0].likes.count == 0

    @pytest.mark.asyncio
    async def test_reply_under_wrong_comment_matches_nothing(self, integration_env):
        # Arrange
        author = await seed_author(integration_env)
        comment_repo = await integration_env.get(CommentRepository)
        reactions = await integration_env.get(ReactionRepository)
        reply_id = ReplyId(uuid4())
        await comment_repo.save(
            Comment(
                id=CommentId(uuid4()),
                post_id=PostId(uuid4()),
                author_id=author.id,
                author_username=author.username,
                content="Owner",
                replies=[
                    Reply(
                        id=reply_id,
                        author_id=author.id,
                        author_username=author.username,
                        content="A reply",
                    )
                ],
            )
        )
        location = resolve_location("reply", "like", CommentId(uuid4()), reply_id)

        # Act
        applied = await reactions.apply(location, UserId(uuid4()), INC)

        # Assert
        assert applied is False
        assert await reactions.exists(location) is False
