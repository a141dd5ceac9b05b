"""Domain value objects for RSVP links."""

from rsvp.domain.value.identifiers import LinkId
from rsvp.domain.value.types import (
    EmailAddress,
    LinkDetails,
    LinkResponse,
    Notification,
    RecipientName,
)

__all__ = [
    # Identifiers
    "LinkId",
    # Types
    "EmailAddress",
    "LinkDetails",
    "LinkResponse",
    "Notification",
    "RecipientName",
]
