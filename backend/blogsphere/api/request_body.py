"""Request Body Reader — decodes JSON and form submissions into a plain mapping.

Invariants:
    - Always returns a dict (possibly empty); never a list or scalar
    - Only malformed JSON or form bodies raise (MalformedBodyError → 400)
    - Form bodies (urlencoded, multipart) keep the last value of repeated keys

Design Decisions:
    - Handlers read the body themselves instead of declaring a pydantic body parameter:
      missing fields must produce the endpoint's own message, not FastAPI's 422 envelope
    - Unknown content types decode to {} so the required-field check reports them
"""

import json
from typing import Any

from fastapi import Request
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from blogsphere.core.errors import MalformedBodyError

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_submission_body(request: Request) -> dict[str, Any]:
    """Decode the request body according to its Content-Type."""
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith(FORM_CONTENT_TYPES):
        try:
            form = await request.form()
        except (StarletteHTTPException, MultiPartException):
            raise MalformedBodyError() from None
        return {key: value for key, value in form.items()}

    if not _is_json(content_type):
        return {}

    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        decoded = json.loads(raw)
    except ValueError:
        raise MalformedBodyError() from None
    return decoded if isinstance(decoded, dict) else {}


def _is_json(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip()
    return media_type == "application/json" or media_type.endswith("+json")
