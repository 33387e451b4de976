"""ContactMessage — persisted shape of one contact form submission.

Invariants:
    - submitted_at is assigned server-side at construction time (UTC)
    - Stored as {name, email, subject, message, submittedAt} in the `contacts` collection
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from blogsphere.models.clock import utc_now

CONTACT_COLLECTION = "contacts"


class ContactMessage(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str | None = None
    name: str
    email: str
    subject: str
    message: str
    submitted_at: datetime = Field(
        default_factory=utc_now, alias="submittedAt",
    )

    def to_document(self) -> dict:
        """Document body for insert_one (the store assigns _id)."""
        return self.model_dump(by_alias=True, exclude={"id"})
