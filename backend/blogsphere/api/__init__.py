"""API Layer — FastAPI routes, body decoding, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON bodies shaped {"message": ...}, {"error": ...} or {"ok": ...}
"""
