"""Vehicle Lookup API - relays plate lookups to the data.gov.il vehicle registry.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
