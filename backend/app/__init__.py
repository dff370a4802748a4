"""Bookstore Application Package — REST API for a catalog of books.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
