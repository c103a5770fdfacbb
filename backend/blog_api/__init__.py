"""
Blog Posts API — Application Package Initializer
=================================================

What: Marks the `blog_api` directory as a Python package.
Why:  Enables module imports like `from blog_api.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    This backend follows a layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (CRUD Logic)       │  ← Required fields, not-found, errors
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes set status codes and delegate to services. Services own the
    request-level rules and can be tested without HTTP. The Post model owns
    the record shape, the author display rule, and the public projection.
"""

__version__ = "1.0.0"
