"""Services Layer: imperative shell around the pure core.

Invariants:
    - book_store owns all database access for books
    - process_url owns request-level checks for the URL endpoint
"""
