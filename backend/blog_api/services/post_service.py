"""
Blog Posts API — Post Service (CRUD Logic)
===========================================

What:  Create / read / update / delete operations for posts.
Why:   Keeps request-level rules (required fields, id matching, not-found)
       out of the route handlers and testable without HTTP.
How:   Runs SQLAlchemy statements on the session it is given and returns
       response schemas built from Post.serialize().
Who:   Called by the /posts route handlers.

Design Decision:
    PostService is stateless: it receives the db session for each call.
    The session dependency commits or rolls back; the service only flushes.

Error Handling Strategy:
    Application errors (ValidationError, NotFoundError) propagate as-is.
    Anything else is logged with a stack trace and wrapped in DatabaseError
    so driver details never reach the client.
"""

import logging
import uuid
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.exceptions import BlogApiError, DatabaseError, NotFoundError, ValidationError
from blog_api.models.post import REQUIRED_FIELDS, Post
from blog_api.schemas.post import (
    PostCreate,
    PostListResponse,
    PostResponse,
    PostUpdate,
)

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "content", "author")


class PostService:
    """
    Business logic layer for post operations.

    Responsibilities:
        - list_posts(): every post, oldest first
        - get_post(): single post with not-found handling
        - create_post(): required field check, insert, id assignment
        - update_post(): id match check, partial replace of updatable fields
        - delete_post(): remove by id
    """

    async def list_posts(self, db: AsyncSession) -> PostListResponse:
        try:
            result = await db.execute(select(Post).order_by(Post.created))
            posts = list(result.scalars().all())
        except Exception as e:
            logger.error("Database error listing posts: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve posts. Please try again.",
                context={"error_type": type(e).__name__},
            )

        return PostListResponse(
            posts=[PostResponse(**post.serialize()) for post in posts],
        )

    async def get_post(self, db: AsyncSession, post_id: UUID) -> PostResponse:
        """
        Retrieve a single post by ID.

        Raises:
            NotFoundError: Post with given ID does not exist (→ 404)
            DatabaseError: Query execution failed (→ 500)
        """
        post = await self._load(db, post_id)
        return PostResponse(**post.serialize())

    async def create_post(self, db: AsyncSession, data: PostCreate) -> PostResponse:
        """
        Insert a new post and return its public representation.

        Workflow:
            1. Reject the body if `title`, `content` or `author` is missing
               (checked in that order; the first missing field is reported)
            2. Build the Post (the model rejects empty title / content)
            3. Flush so the id is assigned inside the request transaction

        Raises:
            ValidationError: Missing or empty required field (→ 400)
            DatabaseError: Insert failed (→ 500)
        """
        for field in REQUIRED_FIELDS:
            if getattr(data, field) is None:
                message = f"Missing `{field}` in request body"
                logger.warning(message)
                raise ValidationError(message=message, field=field)

        try:
            post = Post(
                title=data.title,
                content=data.content,
                author=data.author.model_dump(),
            )
            db.add(post)
            await db.flush()
        except BlogApiError:
            raise
        except Exception as e:
            logger.error("Database error creating post: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the post. Please try again.",
                context={"error_type": type(e).__name__},
            )

        logger.info("Post created: %s", post.id)
        return PostResponse(**post.serialize())

    async def update_post(self, db: AsyncSession, post_id: UUID, data: PostUpdate) -> None:
        """
        Replace the supplied fields of an existing post.

        The body must carry the same id as the path. Only title, content
        and author can change; omitted fields keep their stored value.

        Raises:
            ValidationError: Path and body ids differ, or a field is emptied (→ 400)
            NotFoundError: No post with this id (→ 404)
        """
        if not _same_id(post_id, data.id):
            message = (
                f"Request path id ({post_id}) and request body id "
                f"({data.id}) must match"
            )
            logger.warning(message)
            raise ValidationError(message=message, field="id")

        post = await self._load(db, post_id)

        updated = []
        for field in UPDATABLE_FIELDS:
            value = getattr(data, field)
            if value is None:
                continue
            if field == "author":
                value = value.model_dump()
            setattr(post, field, value)
            updated.append(field)

        try:
            await db.flush()
        except BlogApiError:
            raise
        except Exception as e:
            logger.error("Database error updating post %s: %s", post_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not update the post. Please try again.",
                context={"post_id": str(post_id)},
            )

        logger.info("Post %s updated: %s", post_id, ", ".join(updated) or "no fields")

    async def delete_post(self, db: AsyncSession, post_id: UUID) -> None:
        """
        Remove a post.

        Raises:
            NotFoundError: No post with this id (→ 404)
        """
        post = await self._load(db, post_id)
        try:
            await db.delete(post)
            await db.flush()
        except Exception as e:
            logger.error("Database error deleting post %s: %s", post_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not delete the post. Please try again.",
                context={"post_id": str(post_id)},
            )

        logger.info("Post deleted: %s", post_id)

    async def _load(self, db: AsyncSession, post_id: UUID) -> Post:
        try:
            result = await db.execute(select(Post).where(Post.id == post_id))
            post = result.scalar_one_or_none()
        except Exception as e:
            logger.error("Database error fetching post %s: %s", post_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the post. Please try again.",
                context={"post_id": str(post_id)},
            )

        if post is None:
            raise NotFoundError(resource="post", resource_id=str(post_id))
        return post


def _same_id(path_id: UUID, body_id: Optional[str]) -> bool:
    if not body_id:
        return False
    try:
        return uuid.UUID(body_id) == path_id
    except ValueError:
        return False


# ── Singleton Instance ────────────────────────────────────────────────────
post_service = PostService()
