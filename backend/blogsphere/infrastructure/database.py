"""Document Store — MongoDB client factory and the submission store handed to handlers.

Invariants:
    - One AsyncMongoClient per process, created in the FastAPI lifespan and kept on app.state
    - Every insert writes exactly one document; no retries
    - All pymongo exceptions mapped to StorageError (core/errors.py)
    - ping() never raises: connectivity failures are logged and reported as False

Design Decisions:
    - Store wraps an AsyncDatabase rather than the client: tests inject an in-memory database
    - get_submission_store reads app.state instead of a module-level singleton
    - Timestamps assigned by the models, not by MongoDB, so the response and the document agree
"""

import logging

from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from blogsphere.core.errors import StorageError
from blogsphere.models import ContactMessage, NewsletterSubscription
from blogsphere.models.contact import CONTACT_COLLECTION
from blogsphere.models.newsletter import NEWSLETTER_COLLECTION
from blogsphere.schemas.submission import ContactSubmission

logger = logging.getLogger(__name__)


def create_mongo_client(
    mongo_uri: str, server_selection_timeout_ms: int = 5000,
) -> AsyncMongoClient:
    """Build the process-wide client. Connects lazily on first operation."""
    return AsyncMongoClient(
        mongo_uri,
        serverSelectionTimeoutMS=server_selection_timeout_ms,
        tz_aware=True,
    )


class MongoSubmissionStore:
    """Persists newsletter subscriptions and contact messages."""

    def __init__(self, database):
        self._database = database

    @classmethod
    def from_client(
        cls, client: AsyncMongoClient, default_database: str,
    ) -> "MongoSubmissionStore":
        """Use the database named in the URI, falling back to default_database."""
        return cls(client.get_default_database(default_database))

    async def create_subscription(self, email: str) -> NewsletterSubscription:
        subscription = NewsletterSubscription(email=email)
        inserted_id = await self._insert(
            NEWSLETTER_COLLECTION, subscription.to_document(),
        )
        return subscription.model_copy(update={"id": str(inserted_id)})

    async def create_contact_message(
        self, submission: ContactSubmission,
    ) -> ContactMessage:
        contact = ContactMessage(**submission.model_dump())
        inserted_id = await self._insert(
            CONTACT_COLLECTION, contact.to_document(),
        )
        return contact.model_copy(update={"id": str(inserted_id)})

    async def ping(self) -> bool:
        """Check database connectivity (startup log and readiness probe)."""
        try:
            await self._database.command("ping")
            return True
        except PyMongoError as e:
            logger.error(f"MongoDB ping failed: {e}")
            return False

    async def _insert(self, collection: str, document: dict):
        try:
            result = await self._database[collection].insert_one(document)
        except PyMongoError as e:
            logger.error(
                f"MongoDB insert failed: {e}",
                extra={"collection": collection, "operation": "insert"},
            )
            raise StorageError("insert") from e
        return result.inserted_id


def get_submission_store(request: Request) -> MongoSubmissionStore:
    """FastAPI dependency for the submission store."""
    store = getattr(request.app.state, "submission_store", None)
    if store is None:
        logger.error("Submission store requested before startup")
        raise StorageError("connect")
    return store
