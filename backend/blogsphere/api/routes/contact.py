"""Contact Form — POST /api/contact stores one message per request.

Invariants:
    - Any of name/email/subject/message missing → 400 {"error": "All fields are required"}
    - Storage failure → 500 {"error": "Server error"} via the global handler
"""

import logging

from fastapi import APIRouter, Depends, Request

from blogsphere.api.request_body import read_submission_body
from blogsphere.core.repository_protocols import SubmissionRepository
from blogsphere.core.validation import ALL_FIELDS_REQUIRED, decode_submission
from blogsphere.infrastructure.database import get_submission_store
from blogsphere.schemas.submission import ContactSubmission, MessageResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/contact", tags=["contact"])


@router.post("/", response_model=MessageResponse, include_in_schema=False)
@router.post(
    "", response_model=MessageResponse,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": ContactSubmission.model_json_schema(),
                },
            },
        },
    },
)
async def send_message(
    request: Request,
    store: SubmissionRepository = Depends(get_submission_store),
):
    """Store a contact form message."""
    body = await read_submission_body(request)
    submission = decode_submission(body, ContactSubmission, ALL_FIELDS_REQUIRED)
    contact = await store.create_contact_message(submission)
    logger.info("Contact message stored", extra={"document_id": contact.id})
    return MessageResponse(message="Message sent successfully")
