"""Infrastructure Layer — database connectivity and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Driver failures surface as DatabaseError, never raw SQLAlchemy exceptions

Design Decisions:
    - Session lifecycle and logging setup owned here, wired by main.py lifespan
"""
