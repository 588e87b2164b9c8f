"""Infrastructure Layer - cross-cutting concerns of the HTTP shell.

Invariants:
    - Infrastructure never imports from core/ domain logic
"""
