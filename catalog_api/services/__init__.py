"""Service Layer — endpoint semantics for categories and products.

Invariants:
    - Services raise CatalogError subclasses; they never build HTTP responses
    - All storage access goes through repositories/

Design Decisions:
    - One class per entity, instantiated per request with that request's AsyncSession
"""
