"""Link use cases."""

from rsvp.application.usecase.link.create_link import (
    CreateLinkRequest,
    CreateLinkResponse,
    CreateLinkUseCase,
)
from rsvp.application.usecase.link.get_link import (
    GetLinkRequest,
    GetLinkResponse,
    GetLinkUseCase,
)

__all__ = [
    "CreateLinkRequest",
    "CreateLinkResponse",
    "CreateLinkUseCase",
    "GetLinkRequest",
    "GetLinkResponse",
    "GetLinkUseCase",
]
