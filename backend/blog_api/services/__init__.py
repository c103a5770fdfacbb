# Services package init
"""
Blog Posts API — Services Layer
================================

What:  Logic layer sitting between routes (HTTP) and database (persistence).
Why:   Routes handle HTTP; services handle the rules about posts.

Service Inventory:
    - PostService: list / get / create / update / delete for posts
"""
