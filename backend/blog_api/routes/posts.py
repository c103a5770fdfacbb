"""
Blog Posts API — Post Route Handlers
=====================================

What:  Handles the /posts resource: list, get, create, update, delete.
How:   Extracts path and body, delegates to PostService, sets status codes.

Status codes:
    GET    /posts        200  {"posts": [...]}
    GET    /posts/{id}   200  serialized post
    POST   /posts        201  serialized post
    PUT    /posts/{id}   204  no body
    DELETE /posts/{id}   204  no body
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.database import get_db_session
from blog_api.schemas.post import (
    ErrorResponse,
    PostCreate,
    PostListResponse,
    PostResponse,
    PostUpdate,
)
from blog_api.services.post_service import post_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["Posts"])


@router.get(
    "",
    response_model=PostListResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List all posts",
)
async def list_posts(db: AsyncSession = Depends(get_db_session)) -> PostListResponse:
    return await post_service.list_posts(db=db)


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    responses={
        404: {"description": "Post not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a single post by ID",
)
async def get_post(
    post_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> PostResponse:
    """
    Invalid UUIDs in the path are rejected by FastAPI with 422 before
    the database is queried.
    """
    return await post_service.get_post(db=db, post_id=post_id)


@router.post(
    "",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Missing required field", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a post",
)
async def create_post(
    payload: PostCreate,
    db: AsyncSession = Depends(get_db_session),
) -> PostResponse:
    return await post_service.create_post(db=db, data=payload)


@router.put(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        400: {"description": "Ids do not match or field emptied", "model": ErrorResponse},
        404: {"description": "Post not found", "model": ErrorResponse},
    },
    summary="Update title, content or author of a post",
)
async def update_post(
    post_id: UUID,
    payload: PostUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await post_service.update_post(db=db, post_id=post_id, data=payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "Post not found", "model": ErrorResponse}},
    summary="Delete a post",
)
async def delete_post(
    post_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await post_service.delete_post(db=db, post_id=post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
