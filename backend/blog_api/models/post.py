"""
Blog Posts API — Post SQLAlchemy Model
=======================================

What:  ORM model representing the `posts` table, plus the author display
       rule and the public projection of a post.
Why:   The record shape, the derived `author` string and the response
       shape live together so every caller serializes posts the same way.
How:   Inherits from the shared DeclarativeBase; Alembic reads this for migrations.
Who:   Used by PostService for CRUD operations and by Alembic for schema management.

Table Design Rationale:
    - UUID primary key: generated on insert, never reassigned
    - author: JSON document {"firstName": ..., "lastName": ...}. The
      structure is required; the names inside it are not (author may be
      partly or wholly unknown)
    - created: UTC insert time, used only to order listings

Public representation (serialize):
    {"id": "<uuid>", "title": ..., "content": ..., "author": "First Last"}
    The first/last name split is never exposed.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from sqlalchemy import JSON, DateTime, Index, Text, Uuid, event
from sqlalchemy.orm import Mapped, mapped_column, validates

from blog_api.database import Base
from blog_api.exceptions import ValidationError

REQUIRED_FIELDS = ("title", "content", "author")


def format_author_name(first_name: Optional[str], last_name: Optional[str]) -> str:
    """
    Join first and last name with one space and trim the result.

    Absent parts (None) count as empty strings, so the function never fails:
        ("Jane", "Doe") -> "Jane Doe"
        ("", "Doe")     -> "Doe"
        (None, None)    -> ""
    """
    return f"{first_name or ''} {last_name or ''}".strip()


class Post(Base):
    """
    One blog post.

    Lifecycle:
        1. Created by POST /posts (id and created assigned on insert)
        2. title / content / author replaced by PUT /posts/{id}
        3. Removed by DELETE /posts/{id}; no soft delete or history
    """

    __tablename__ = "posts"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique identifier, assigned on insert",
    )

    title: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Post title (required, non-empty)",
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Post body (required, non-empty)",
    )

    # Document column; keys mirror the request body (firstName / lastName)
    author: Mapped[Dict[str, Optional[str]]] = mapped_column(
        JSON,
        nullable=False,
        comment="Author name document: firstName, lastName (both optional)",
    )

    created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        comment="When this post was created (UTC)",
    )

    # GET /posts lists oldest first
    __table_args__ = (
        Index("idx_posts_created", "created"),
    )

    # ── Write validation ──────────────────────────────────────────────────

    @validates("title", "content")
    def _validate_text(self, key: str, value: Optional[str]) -> str:
        if value is None or value == "":
            raise ValidationError(message=f"Post `{key}` is required", field=key)
        return value

    @validates("id")
    def _validate_id(self, key: str, value: Optional[uuid.UUID]) -> Optional[uuid.UUID]:
        if self.id is not None and value != self.id:
            raise ValidationError(
                message=f"Post `id` is immutable (is {self.id}, got {value})",
                field=key,
            )
        return value

    @validates("author")
    def _validate_author(self, key: str, value: Optional[Mapping[str, Any]]) -> Dict[str, Optional[str]]:
        if value is None:
            raise ValidationError(message="Post `author` is required", field=key)
        if not isinstance(value, Mapping):
            raise ValidationError(
                message="Post `author` must be an object with firstName / lastName",
                field=key,
            )
        # Unknown keys are dropped; only the two name parts are stored
        return {
            "firstName": value.get("firstName"),
            "lastName": value.get("lastName"),
        }

    def check_required(self) -> None:
        """
        Raise ValidationError for the first required field never assigned.

        @validates only runs on assignment, so a Post built without `title`
        slips past it; this runs before every insert and update flush.
        """
        for field in REQUIRED_FIELDS:
            if getattr(self, field) is None:
                raise ValidationError(message=f"Post `{field}` is required", field=field)

    # ── Derived fields ────────────────────────────────────────────────────

    @property
    def author_string(self) -> str:
        """Display name built from the stored author document."""
        author = self.author or {}
        return format_author_name(author.get("firstName"), author.get("lastName"))

    def serialize(self) -> Dict[str, Any]:
        """Public representation returned across the API boundary."""
        return {
            "id": str(self.id) if self.id is not None else None,
            "title": self.title,
            "content": self.content,
            "author": self.author_string,
        }

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, title='{self.title}')>"


@event.listens_for(Post, "before_insert")
@event.listens_for(Post, "before_update")
def _check_required_before_write(mapper, connection, target: Post) -> None:
    target.check_required()
