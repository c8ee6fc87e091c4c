"""Infrastructure Layer: external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure never decides HTTP responses; it raises core errors
"""
