"""Infrastructure Layer: cross-cutting concerns shared by every entry point.

Invariants:
    - Infrastructure never imports from core/ domain logic
"""
