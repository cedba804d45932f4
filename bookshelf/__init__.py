"""Bookshelf Application Package: books CRUD and URL processor service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
