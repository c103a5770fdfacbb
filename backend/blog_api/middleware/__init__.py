# Middleware package init
"""
Blog Posts API — Middleware Package
====================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Rate Limit] → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Rate Limit first: reject abusive clients before any database work
    2. Request ID: correlation id for logs and error bodies
    3. Logging: one access line per request, tagged with the request id
"""
