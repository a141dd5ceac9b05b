"""Base class for value objects."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel
from pydantic import ValidationError as PydanticValidationError


class ValueObject(BaseModel):
    """Base class for all value objects.

    Value objects are immutable and compared by value, not identity.
    """

    model_config = ConfigDict(
        frozen=True,  # All value objects are immutable
        arbitrary_types_allowed=True,
    )


T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Base class for value objects that wrap a single primitive value.

    RootValueObject uses Pydantic's RootModel, which means:
    - The model wraps a single value (accessed via .root)
    - model_dump() automatically returns the primitive value, not a dict
    - Perfect for simple wrappers like EmailAddress or RecipientName
    """

    model_config = ConfigDict(
        frozen=True,  # All value objects are immutable
    )

    def __str__(self) -> str:
        """Return string representation of the root value."""
        return str(self.root)


def first_error_message(error: PydanticValidationError) -> str:
    """Extract the human-readable message of the first validation failure.

    Validators raise ``ValueError("...")``; pydantic wraps that message with a
    "Value error, " prefix. This returns the raised text when available.

    Args:
        error: Pydantic validation error

    Returns:
        Message suitable for API clients
    """
    details = error.errors()
    if not details:
        return str(error)
    first = details[0]
    ctx = first.get("ctx") or {}
    if "error" in ctx:
        return str(ctx["error"])
    return first["msg"]
