"""
Blog Posts API — Pydantic Request/Response Schemas
===================================================

What:  Pydantic models defining the API contract for /posts.
Why:   Input parsing, response serialization, and OpenAPI doc generation.
How:   FastAPI validates request bodies against these models and renders
       responses through them.

Design Decision:
    Schemas are separate from the SQLAlchemy model because:
    1. The response exposes `author` as one string, while the database
       stores a firstName / lastName document
    2. Request fields are optional here so that the service's required
       field check (400 with a named field) runs instead of FastAPI's 422
"""

from typing import List, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What the client sends
# ══════════════════════════════════════════════════════════════════════════


class AuthorName(BaseModel):
    """Structured author name as sent by clients. Both parts may be omitted."""
    firstName: Optional[str] = Field(default=None, description="Author first name")
    lastName: Optional[str] = Field(default=None, description="Author last name")


class PostCreate(BaseModel):
    """
    What:  Body of POST /posts.

    All three fields are required by the API, but they are Optional here:
    PostService reports the first missing one as
    "Missing `<field>` in request body" (HTTP 400).
    """
    title: Optional[str] = Field(default=None, description="Post title")
    content: Optional[str] = Field(default=None, description="Post body")
    author: Optional[AuthorName] = Field(default=None, description="Author name")


class PostUpdate(BaseModel):
    """
    What:  Body of PUT /posts/{id}.

    `id` must repeat the path id. Fields left out are not changed.
    """
    id: Optional[str] = Field(default=None, description="Must equal the id in the path")
    title: Optional[str] = Field(default=None, description="New title")
    content: Optional[str] = Field(default=None, description="New body")
    author: Optional[AuthorName] = Field(default=None, description="New author name")


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class PostResponse(BaseModel):
    """
    What:  Public representation of a post (Post.serialize()).
    Who:   Returned by GET /posts/{id} and POST /posts, and inside list responses.
    """
    id: str = Field(description="Post identifier")
    title: str = Field(description="Post title")
    content: str = Field(description="Post body")
    author: str = Field(description="Author display name, e.g. 'Jane Doe'")


class PostListResponse(BaseModel):
    """Envelope for GET /posts."""
    posts: List[PostResponse] = Field(description="All posts, oldest first")


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Example:
        {
            "error": "validation_error",
            "message": "Missing `title` in request body",
            "details": {"field": "title"},
            "request_id": "1a2b3c4d"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
