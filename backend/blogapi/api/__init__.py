"""API Layer — FastAPI routes, request dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every endpoint answers with the {success, message?, data?} envelope

Design Decisions:
    - Thin routes delegate to services (AccountService, BlogService)
"""
