"""Infrastructure Layer — database engine and cross-cutting concerns.

Invariants:
    - Infrastructure never imports domain logic beyond core/errors.py
    - All SQLAlchemy failures mapped to DatabaseError before leaving this layer
"""
