"""API Layer - FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses, except the two
      text/plain views renderers parse verbatim

Design Decisions:
    - Thin routes delegate to the core PhotoAlbum facade
"""
