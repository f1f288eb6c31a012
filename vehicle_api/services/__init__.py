"""Services Layer - request pipelines composed from core logic and infrastructure.

Invariants:
    - Services never raise for an expected failure; they return a LookupOutcome
"""
