"""Document Models — persisted shapes of the two submission entities.

Invariants:
    - Models are immutable (frozen) once constructed
    - Timestamps are server-assigned; request bodies never set them

Design Decisions:
    - One file per entity for locality
    - Pydantic models with aliases: snake_case in Python, camelCase in the stored document
"""

from blogsphere.models.contact import ContactMessage  # noqa: F401
from blogsphere.models.newsletter import NewsletterSubscription  # noqa: F401
