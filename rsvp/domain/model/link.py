"""Link entity.

A link is a single-use, time-limited invitation addressed to one recipient.
Opening it reveals the recipient's name and email; answering it records a
yes/no response exactly once.
"""

from datetime import datetime, timedelta
from typing import Optional

from pydantic import model_validator

from rsvp.domain.model.common import DomainModel
from rsvp.domain.value import (
    EmailAddress,
    LinkDetails,
    LinkId,
    LinkResponse,
    RecipientName,
)

LINK_TTL = timedelta(days=30)


class Link(DomainModel):
    """Link entity.

    Business rules:
    - The link is valid for a fixed LINK_TTL after creation
    - Expiration is evaluated at read time, links are never deleted
    - response and responded_at are set together, exactly once
    """

    id: LinkId
    recipient_email: EmailAddress
    recipient_name: RecipientName
    created_at: datetime
    expires_at: datetime
    response: Optional[LinkResponse] = None
    responded_at: Optional[datetime] = None

    @model_validator(mode="after")
    def check_invariants(self) -> "Link":
        """Enforce the fixed TTL and the paired response fields."""
        if self.expires_at != self.created_at + LINK_TTL:
            raise ValueError("expires_at must equal created_at + LINK_TTL")
        if (self.response is None) != (self.responded_at is None):
            raise ValueError("response and responded_at must be set together")
        return self

    @classmethod
    def issue(
        cls,
        link_id: LinkId,
        email: EmailAddress,
        name: RecipientName,
        now: datetime,
    ) -> "Link":
        """Create an unanswered link valid from ``now``."""
        return cls(
            id=link_id,
            recipient_email=email,
            recipient_name=name,
            created_at=now,
            expires_at=now + LINK_TTL,
        )

    @property
    def is_answered(self) -> bool:
        return self.response is not None

    def is_expired(self, now: datetime) -> bool:
        """Whether the link has lapsed at ``now``."""
        return now > self.expires_at

    def answer(self, response: LinkResponse, now: datetime) -> "Link":
        """Return a copy with the response recorded.

        Raises:
            ValueError: If the link is already answered
        """
        if self.is_answered:
            raise ValueError(f"Link {self.id} is already answered")
        return self.model_copy(update={"response": response, "responded_at": now})

    def details(self) -> LinkDetails:
        """Public projection without response state."""
        return LinkDetails(
            name=self.recipient_name.root, email=self.recipient_email.root
        )
