"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - All SQLAlchemy failures leave this layer as ContentStoreError
"""
