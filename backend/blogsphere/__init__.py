"""Blogsphere Application Package — newsletter and contact form backend.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
