"""Core Layer — pure domain logic: errors, validation, boundary protocols.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
    - Validation functions are pure and deterministic
"""
