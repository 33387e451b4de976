"""Newsletter Signup — POST /api/newsletter stores one subscription per request.

Invariants:
    - Missing/empty/non-string email → 400 {"error": "Email is required"}, nothing stored
    - Storage failure → 500 {"error": "Server error"} via the global handler
    - Duplicate emails are accepted; each request inserts its own document
"""

import logging

from fastapi import APIRouter, Depends, Request

from blogsphere.api.request_body import read_submission_body
from blogsphere.core.repository_protocols import SubmissionRepository
from blogsphere.core.validation import EMAIL_REQUIRED, decode_submission
from blogsphere.infrastructure.database import get_submission_store
from blogsphere.schemas.submission import MessageResponse, NewsletterSignup

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/newsletter", tags=["newsletter"])


@router.post("/", response_model=MessageResponse, include_in_schema=False)
@router.post(
    "", response_model=MessageResponse,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": NewsletterSignup.model_json_schema(),
                },
            },
        },
    },
)
async def subscribe(
    request: Request,
    store: SubmissionRepository = Depends(get_submission_store),
):
    """Subscribe an email address to the newsletter."""
    body = await read_submission_body(request)
    signup = decode_submission(body, NewsletterSignup, EMAIL_REQUIRED)
    subscription = await store.create_subscription(signup.email)
    logger.info(
        "Newsletter subscription stored",
        extra={"document_id": subscription.id},
    )
    return MessageResponse(message="Subscription successful")
