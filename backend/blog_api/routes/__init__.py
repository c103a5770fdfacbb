# Routes package init
"""
Blog Posts API — API Routes Package
====================================

Route Inventory:
    - posts.py:   GET    /posts           (list posts)
                  GET    /posts/{id}      (get one post)
                  POST   /posts           (create a post)
                  PUT    /posts/{id}      (update a post)
                  DELETE /posts/{id}      (delete a post)
    - health.py:  GET    /health          (service health check)

Design Principle:
    Routes are THIN: they parse the request, call PostService, and pick
    the status code. Rules about posts live in the service and the model.
"""
