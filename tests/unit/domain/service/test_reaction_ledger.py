"""Unit tests for the ReactionLedger."""

from uuid import uuid4

import pytest

from scribe.domain.error import NotFoundError
from scribe.domain.model import Comment, Post, Reply, resolve_location
from scribe.domain.repository import CommentRepository, PostRepository
from scribe.domain.service import ReactionLedger
from scribe.domain.value import (
    CommentId,
    Direction,
    PostId,
    ReplyId,
    UserId,
    Username,
)
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

INC = Direction.INCREASE
DEC = Direction.DECREASE


async def seed_post(post_repo: PostRepository) -> Post:
    post = Post(
        id=PostId(uuid4()),
        title="Test Post",
        content="Test content",
        author_id=UserId(uuid4()),
        author_username=Username("author"),
    )
    return await post_repo.save(post)


def make_reply(reply_id: ReplyId | None = None) -> Reply:
    return Reply(
        id=reply_id or ReplyId(uuid4()),
        author_id=UserId(uuid4()),
        author_username=Username("replier"),
        content="A reply",
    )


async def seed_comment(
    comment_repo: CommentRepository, replies: list[Reply] | None = None
) -> Comment:
    comment = Comment(
        id=CommentId(uuid4()),
        post_id=PostId(uuid4()),
        author_id=UserId(uuid4()),
        author_username=Username("commenter"),
        content="A comment",
        replies=replies or [],
    )
    return await comment_repo.save(comment)


class TestPostVotes:
    """Votes on posts."""

    @pytest.mark.asyncio
    async def test_upvote_adds_user_and_counts(self, unit_env):
        """An upvote puts the user in the set and bumps the counter."""
        # Arrange
        ledger = await unit_env.get(ReactionLedger)
        post_repo = await unit_env.get(PostRepository)
        post = await seed_post(post_repo)
        user_id = UserId(uuid4())

        # Act
        applied = await ledger.apply_reaction(
            resolve_location("post", "upvote", post.id), user_id, INC
        )

        # Assert
        assert applied is True
        saved = await post_repo.find_by_id(post.id)
        assert saved.upvotes.users == [user_id]
        assert saved.upvotes.count == 1
        assert saved.downvotes.count == 0

    @pytest.mark.asyncio
    async def test_repeated_upvote_counts_once(self, unit_env):
        """A second upvote by the same user changes nothing."""
        # Arrange
        ledger = await unit_env.get(ReactionLedger)
        post_repo = await unit_env.get(PostRepository)
        post = await seed_post(post_repo)
        user_id = UserId(uuid4())
        location = resolve_location("post", "upvote", post.id)
        await ledger.apply_reaction(location, user_id, INC)

        # Act
        applied = await ledger.apply_reaction(location, user_id, INC)

        # Assert
        assert applied is False
        saved = await post_repo.find_by_id(post.id)
        assert saved.upvotes.count == 1
        assert saved.upvotes.users == [user_id]

    @pytest.mark.asyncio
    async def test_withdraw_by_non_member_is_noop(self, unit_env):
        """Removing a vote that was never cast changes nothing."""
        # Arrange
        ledger = await unit_env.get(ReactionLedger)
        post_repo = await unit_env.get(PostRepository)
        post = await seed_post(post_repo)
        voter, stranger = UserId(uuid4()), UserId(uuid4())
        location = resolve_location("post", "downvote", post.id)
        await ledger.apply_reaction(location, voter, INC)

        # Act
        applied = await ledger.apply_reaction(location, stranger, DEC)

        # Assert
        assert applied is False
        saved = await post_repo.find_by_id(post.id)
        assert saved.downvotes.users == [voter]
        assert saved.downvotes.count == 1

    @pytest.mark.asyncio
    async def test_upvote_and_downvote_are_independent(self, unit_env):
        """A user may sit in both vote sets of one post."""
        # Arrange
        ledger = await unit_env.get(ReactionLedger)
        post_repo = await unit_env.get(PostRepository)
        post = await seed_post(post_repo)
        user_id = UserId(uuid4())

        # Act
        await ledger.apply_reaction(
            resolve_location("post", "upvote", post.id), user_id, INC
        )
        await ledger.apply_reaction(
            resolve_location("post", "downvote", post.id), user_id, INC
        )

        # Assert
        saved = await post_repo.find_by_id(post.id)
        assert saved.upvotes.users == [user_id]
        assert saved.downvotes.users == [user_id]

    @pytest.mark.asyncio
    async def test_count_tracks_set_through_mixed_sequence(self, unit_env):
        """count == len(users) after any sequence of calls."""
        # Arrange
        ledger = await unit_env.get(ReactionLedger)
        post_repo = await unit_env.get(PostRepository)
        post = await seed_post(post_repo)
        location = resolve_location("post", "upvote", post.id)
        a, b, c = (UserId(uuid4()) for _ in range(3))
        calls = [
            (a, INC), (b, INC), (a, INC), (c, DEC), (b, DEC),
            (b, DEC), (c, INC), (a, DEC), (a, INC), (c, INC),
        ]

        for user_id, direction in calls:
            # Act
            await ledger.apply_reaction(location, user_id, direction)

            # Assert
            saved = await post_repo.find_by_id(post.id)
            assert saved.upvotes.count == len(saved.upvotes.users)
            assert len(set(saved.upvotes.users)) == len(saved.upvotes.users)

        saved = await post_repo.find_by_id(post.id)
        assert set(saved.upvotes.users) == {a, c}

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, unit_env):
        """Reacting to a post that does not exist is a 404, not a no-op."""
        ledger = await unit_env.get(ReactionLedger)
        with pytest.raises(NotFoundError):
            await ledger.apply_reaction(
                resolve_location("post", "upvote", uuid4()), UserId(uuid4()), INC
            )


class TestCommentAndReplyLikes:
    """Likes on comments and replies."""

    @pytest.mark.asyncio
    async def test_comment_like_and_unlike(self, unit_env):
        """Liking then unliking a comment leaves the set empty."""
        # Arrange
        ledger = await unit_env.get(ReactionLedger)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await seed_comment(comment_repo)
        user_id = UserId(uuid4())
        location = resolve_location("comment", "like", comment.id)

        # Act
        liked = await ledger.apply_reaction(location, user_id, INC)
        unliked = await ledger.apply_reaction(location, user_id, DEC)

        # Assert
        assert liked and unliked
        saved = await comment_repo.find_by_id(comment.id)
        assert saved.likes.users == []
        assert saved.likes.count == 0

    @pytest.mark.asyncio
    async def test_reply_like_touches_only_that_reply(self, unit_env):
        """Liking C1/R7 changes C1.replies[R7].likes and nothing else."""
        # Arrange
        ledger = await unit_env.get(ReactionLedger)
        comment_repo = await unit_env.get(CommentRepository)
        r7 = make_reply()
        sibling = make_reply()
        c1 = await seed_comment(comment_repo, replies=[sibling, r7])
        other = await seed_comment(comment_repo, replies=[make_reply(r7.id)])
        user_id = UserId(uuid4())

        # Act
        applied = await ledger.apply_reaction(
            resolve_location("reply", "like", c1.id, r7.id), user_id, INC
        )

        # Assert
        assert applied is True
        saved = await comment_repo.find_by_id(c1.id)
        assert saved.find_reply(r7.id).likes.users == [user_id]
        assert saved.find_reply(r7.id).dislikes.count == 0
        assert saved.find_reply(sibling.id).likes.count == 0
        assert saved.likes.count == 0
        # Same reply id under another comment is a different reply
        untouched = await comment_repo.find_by_id(other.id)
        assert untouched.find_reply(r7.id).likes.count == 0

    @pytest.mark.asyncio
    async def test_reply_under_wrong_comment_not_found(self, unit_env):
        """A reply id only resolves under its own comment."""
        # Arrange
        ledger = await unit_env.get(ReactionLedger)
        comment_repo = await unit_env.get(CommentRepository)
        reply = make_reply()
        await seed_comment(comment_repo, replies=[reply])
        elsewhere = await seed_comment(comment_repo)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Reply"):
            await ledger.apply_reaction(
                resolve_location("reply", "like", elsewhere.id, reply.id),
                UserId(uuid4()),
                INC,
            )
