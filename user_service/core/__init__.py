"""Core Layer — domain types, errors and contracts, no IO.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
    - All functions are pure and deterministic

Design Decisions:
    - Core separated from the IO shell so handlers and tests depend on contracts only
"""
