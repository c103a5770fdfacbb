"""Create posts table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `posts` table holding blog posts.
How:   UUID primary key, TEXT title/content, JSON author document,
       timezone-aware creation time with an index for ordered listing.

Rollback: downgrade() drops the table entirely (destructive — all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Column docs live in blog_api/models/post.py."""
    op.create_table(
        "posts",
        sa.Column(
            "id",
            sa.Uuid(),
            nullable=False,
            comment="Unique identifier, assigned on insert",
        ),
        sa.Column(
            "title",
            sa.Text(),
            nullable=False,
            comment="Post title (required, non-empty)",
        ),
        sa.Column(
            "content",
            sa.Text(),
            nullable=False,
            comment="Post body (required, non-empty)",
        ),
        sa.Column(
            "author",
            sa.JSON(),
            nullable=False,
            comment="Author name document: firstName, lastName (both optional)",
        ),
        sa.Column(
            "created",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this post was created (UTC)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # GET /posts lists oldest first
    op.create_index("idx_posts_created", "posts", ["created"])


def downgrade() -> None:
    op.drop_index("idx_posts_created", table_name="posts")
    op.drop_table("posts")
