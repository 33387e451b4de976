"""Submission Schemas — typed request DTOs and response bodies for the form endpoints.

Invariants:
    - Every required field is a StrictStr with min_length=1 (no coercion from numbers/bools)
    - No format checks: emails are not pattern-matched, values are not stripped
    - Unknown keys in the request body are ignored

Design Decisions:
    - StrictStr over str: a JSON number or boolean is reported as missing, not silently stringified
"""

from pydantic import BaseModel, Field, StrictStr


class NewsletterSignup(BaseModel):
    """Body of POST /api/newsletter."""
    email: StrictStr = Field(min_length=1)


class ContactSubmission(BaseModel):
    """Body of POST /api/contact."""
    name: StrictStr = Field(min_length=1)
    email: StrictStr = Field(min_length=1)
    subject: StrictStr = Field(min_length=1)
    message: StrictStr = Field(min_length=1)


class MessageResponse(BaseModel):
    """Confirmation returned by a successful submission."""
    message: str


class HealthResponse(BaseModel):
    ok: bool
