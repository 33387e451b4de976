"""Infrastructure Layer — document store client and logging setup.

Invariants:
    - All pymongo errors mapped to StorageError before leaving this package
"""
