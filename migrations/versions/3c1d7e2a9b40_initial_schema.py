"""initial_schema

Create the schema for Scribe:
- Users (username/email accounts with bcrypt hashes and recovery codes)
- Posts (with upvote and downvote sets)
- Comments (with like and dislike sets; not tied to the post's lifetime)
- Replies (owned by a comment, keyed by (comment_id, id))

Each reaction set is a uuid[] of members plus a counter, with a CHECK keeping
the counter equal to the array's cardinality.

Revision ID: 3c1d7e2a9b40
Revises:
Create Date: 2025-11-02 10:12:44.581203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1d7e2a9b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    ]


def _reaction_set(table: str, kind: str) -> list:
    return [
        sa.Column(
            f"{kind}_users",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column(f"{kind}_count", sa.Integer(), nullable=False, server_default="0"),
        sa.CheckConstraint(
            f"{kind}_count = cardinality({kind}_users)",
            name=f"ck_{table}_{kind}_count",
        ),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("username", sa.String(32), nullable=False),
        sa.Column("email", sa.String(254), nullable=False),  # Stored lowercase
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("recovery_code", sa.String(6), nullable=True),
        sa.Column(
            "recovery_code_issued_at", sa.TIMESTAMP(timezone=True), nullable=True
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="uq_users_username"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("author_username", sa.String(32), nullable=False),  # Denormalized
        *_timestamps(),
        *_reaction_set("posts", "upvote"),
        *_reaction_set("posts", "downvote"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_posts_created_at", "posts", [sa.text("created_at DESC")]
    )
    op.create_index("idx_posts_author_id", "posts", ["author_id"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    # post_id carries no foreign key: deleting a post keeps its comments
    op.create_table(
        "comments",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("author_username", sa.String(32), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        *_timestamps(),
        *_reaction_set("comments", "like"),
        *_reaction_set("comments", "dislike"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_comments_post_id", "comments", ["post_id", "created_at"])

    # ========================================================================
    # REPLIES table
    # ========================================================================
    op.create_table(
        "replies",
        sa.Column("comment_id", sa.UUID(), nullable=False),
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("author_username", sa.String(32), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        *_timestamps(),
        *_reaction_set("replies", "like"),
        *_reaction_set("replies", "dislike"),
        sa.ForeignKeyConstraint(["comment_id"], ["comments.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("comment_id", "id"),
    )
    op.create_index(
        "idx_replies_comment_id", "replies", ["comment_id", "created_at"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("replies")
    op.drop_table("comments")
    op.drop_table("posts")
    op.drop_table("users")
