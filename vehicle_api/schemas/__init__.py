"""Pydantic Schemas - response contracts for the API endpoints.

Invariants:
    - Schemas document the wire shape; core/envelope.py produces it
"""
