"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /api/health always returns 200 {"ok": true} if the process is up (liveness)
    - GET /api/health/ready returns 503 if MongoDB does not answer a ping (readiness)

Design Decisions:
    - Liveness never touches the database: a down database must not get the process restarted
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from blogsphere.core.repository_protocols import SubmissionRepository
from blogsphere.infrastructure.database import get_submission_store
from blogsphere.schemas.submission import HealthResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/", response_model=HealthResponse, include_in_schema=False)
@router.get("", response_model=HealthResponse, status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return HealthResponse(ok=True)


@router.get("/ready/", include_in_schema=False)
@router.get("/ready")
async def readiness_check(
    store: SubmissionRepository = Depends(get_submission_store),
):
    """Readiness probe — includes database connectivity."""
    if not await store.ping():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"ok": False, "reason": "database_unavailable"},
        )
    return {"ok": True, "database": "reachable"}
