"""Infrastructure Layer - external service clients and cross-cutting concerns.

Invariants:
    - All external calls wrapped with timeout and error mapping
    - Failures surface as core/errors.py types, never as raw httpx exceptions
"""
