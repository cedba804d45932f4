"""Infrastructure Layer: database plumbing and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from core/ domain logic except core.errors
    - Driver errors are mapped to core.errors before they leave this layer
"""
