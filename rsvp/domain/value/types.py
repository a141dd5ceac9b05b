"""Domain value objects for RSVP links.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and normalization.
"""

from enum import Enum

from pydantic import field_validator

from rsvp.domain.value.common import RootValueObject, ValueObject


class LinkResponse(str, Enum):
    """Answer recorded against a link."""

    YES = "yes"
    NO = "no"


class EmailAddress(RootValueObject[str]):
    """Recipient email address.

    Normalized to lower case with surrounding whitespace removed.
    Only the presence of ``@`` is checked; deliverability is the
    transport's concern.
    """

    @field_validator("root", mode="before")
    @classmethod
    def normalize_email(cls, v: object) -> str:
        """Validate and normalize the address."""
        if not isinstance(v, str) or "@" not in v:
            raise ValueError("Invalid email address")
        return v.strip().lower()


class RecipientName(RootValueObject[str]):
    """Display name of the invitation recipient."""

    @field_validator("root", mode="before")
    @classmethod
    def normalize_name(cls, v: object) -> str:
        """Validate the name is not blank and trim it."""
        if not isinstance(v, str) or not v.strip():
            raise ValueError("Name is required")
        return v.strip()


class LinkDetails(ValueObject):
    """Public projection of a link, safe to show to the responder."""

    name: str
    email: str


class Notification(ValueObject):
    """Outbound email with plain-text and HTML bodies."""

    to: str
    subject: str
    html: str
    text: str
