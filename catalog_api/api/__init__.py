"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses (or empty 204 bodies)

Design Decisions:
    - Thin routes delegate to services; query-string parsing and sort-key
      validation happen here, at the boundary
"""
