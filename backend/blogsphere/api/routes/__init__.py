"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Every route also answers on its trailing-slash path (hidden from the schema)
    - Handlers follow the same pipeline: read body → decode DTO → store → confirm

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
