"""NewsletterSubscription — persisted shape of one newsletter signup.

Invariants:
    - subscribed_at is assigned server-side at construction time (UTC)
    - Stored as {email, subscribedAt} in the `newsletters` collection
    - No uniqueness on email: duplicates are separate documents
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from blogsphere.models.clock import utc_now

NEWSLETTER_COLLECTION = "newsletters"


class NewsletterSubscription(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str | None = None
    email: str
    subscribed_at: datetime = Field(
        default_factory=utc_now, alias="subscribedAt",
    )

    def to_document(self) -> dict:
        """Document body for insert_one (the store assigns _id)."""
        return self.model_dump(by_alias=True, exclude={"id"})
