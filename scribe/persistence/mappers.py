"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable

from scribe.domain.model import Comment, Post, ReactionSet, Reply, User
from scribe.domain.value import (
    CommentId,
    Email,
    PostId,
    ReplyId,
    UserId,
    Username,
)


def _reaction_set(row: Dict[str, Any], kind: str) -> ReactionSet:
    return ReactionSet(
        users=[UserId(u) for u in row[f"{kind}_users"] or []],
        count=row[f"{kind}_count"],
    )


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        username=Username(row["username"]),
        email=Email(row["email"]),
        password_hash=row["password_hash"],
        avatar_url=row.get("avatar_url"),
        recovery_code=row.get("recovery_code"),
        recovery_code_issued_at=row.get("recovery_code_issued_at"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion
    """
    return user.model_dump()


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(row["id"]),
        title=row["title"],
        content=row["content"],
        author_id=UserId(row["author_id"]),
        author_username=Username(row["author_username"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        upvotes=_reaction_set(row, "upvote"),
        downvotes=_reaction_set(row, "downvote"),
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion
    """
    data = post.model_dump(exclude={"upvotes", "downvotes"})
    data.update(_reaction_columns("upvote", post.upvotes))
    data.update(_reaction_columns("downvote", post.downvotes))
    return data


def row_to_reply(row: Dict[str, Any]) -> Reply:
    """Convert database row to Reply domain model."""
    return Reply(
        id=ReplyId(row["id"]),
        author_id=UserId(row["author_id"]),
        author_username=Username(row["author_username"]),
        content=row["content"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        likes=_reaction_set(row, "like"),
        dislikes=_reaction_set(row, "dislike"),
    )


def reply_to_dict(comment_id: CommentId, reply: Reply) -> Dict[str, Any]:
    """Convert Reply domain model to database dict, keyed under its comment."""
    data = reply.model_dump(exclude={"likes", "dislikes"})
    data["comment_id"] = comment_id
    data.update(_reaction_columns("like", reply.likes))
    data.update(_reaction_columns("dislike", reply.dislikes))
    return data


def row_to_comment(row: Dict[str, Any], replies: Iterable[Reply] = ()) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict
        replies: The comment's replies, in creation order

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(row["id"]),
        post_id=PostId(row["post_id"]),
        author_id=UserId(row["author_id"]),
        author_username=Username(row["author_username"]),
        content=row["content"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        likes=_reaction_set(row, "like"),
        dislikes=_reaction_set(row, "dislike"),
        replies=list(replies),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict (replies excluded).

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    data = comment.model_dump(exclude={"likes", "dislikes", "replies"})
    data.update(_reaction_columns("like", comment.likes))
    data.update(_reaction_columns("dislike", comment.dislikes))
    return data


def _reaction_columns(kind: str, reactions: ReactionSet) -> Dict[str, Any]:
    return {f"{kind}_users": list(reactions.users), f"{kind}_count": reactions.count}
