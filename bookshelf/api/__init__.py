"""API Layer: FastAPI routes, dependencies, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every error response has the shape {"error": message}

Design Decisions:
    - Thin routes delegate to services and core
"""
