"""SQLAlchemy table definitions for Scribe.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.

Every reaction set is stored as a ``<kind>_users uuid[]`` column next to a
``<kind>_count`` integer on the same row, so one UPDATE changes both.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()


def reaction_columns(kind: str) -> list:
    """Membership array and counter for one reaction kind."""
    return [
        Column(
            f"{kind}_users",
            ARRAY(UUID(as_uuid=True)),
            nullable=False,
            server_default="{}",
        ),
        Column(f"{kind}_count", Integer, nullable=False, server_default="0"),
        CheckConstraint(f"{kind}_count = cardinality({kind}_users)"),
    ]


# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("username", String(32), nullable=False, unique=True),
    Column("email", String(254), nullable=False, unique=True),  # Stored lowercase
    Column("password_hash", Text, nullable=False),
    Column("avatar_url", Text, nullable=True),
    Column("recovery_code", String(6), nullable=True),
    Column("recovery_code_issued_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=False),
    Column("author_id", UUID(as_uuid=True), ForeignKey("users.id"), nullable=False),
    Column("author_username", String(32), nullable=False),  # Denormalized
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    *reaction_columns("upvote"),
    *reaction_columns("downvote"),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_author_id", posts_table.c.author_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
# No foreign key to posts: deleting a post leaves its comments in place.
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("post_id", UUID(as_uuid=True), nullable=False),
    Column("author_id", UUID(as_uuid=True), ForeignKey("users.id"), nullable=False),
    Column("author_username", String(32), nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    *reaction_columns("like"),
    *reaction_columns("dislike"),
)

Index("idx_comments_post_id", comments_table.c.post_id, comments_table.c.created_at)

# ============================================================================
# REPLIES TABLE (owned by comments)
# ============================================================================
replies_table = Table(
    "replies",
    metadata,
    Column(
        "comment_id",
        UUID(as_uuid=True),
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("id", UUID(as_uuid=True), nullable=False),
    Column("author_id", UUID(as_uuid=True), ForeignKey("users.id"), nullable=False),
    Column("author_username", String(32), nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    *reaction_columns("like"),
    *reaction_columns("dislike"),
    PrimaryKeyConstraint("comment_id", "id"),
)

Index("idx_replies_comment_id", replies_table.c.comment_id, replies_table.c.created_at)
