"""Boundary Protocols — contract between route handlers and the document store.

Invariants:
    - Handlers depend on SubmissionRepository, never on pymongo types
    - Implementations raise StorageError (core/errors.py) on any storage failure

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
"""

from typing import Protocol

from blogsphere.models import ContactMessage, NewsletterSubscription
from blogsphere.schemas.submission import ContactSubmission


class SubmissionRepository(Protocol):
    """Contract for submission persistence — implemented by infrastructure."""
    async def create_subscription(self, email: str) -> NewsletterSubscription: ...
    async def create_contact_message(
        self, submission: ContactSubmission,
    ) -> ContactMessage: ...
    async def ping(self) -> bool: ...
