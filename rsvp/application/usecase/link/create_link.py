"""Create link use case."""

import logfire
from pydantic import BaseModel

from rsvp.application.usecase.base import BaseUseCase
from rsvp.config import Settings
from rsvp.domain.service import LinkService


class CreateLinkRequest(BaseModel):
    """Request to create a link."""

    email: str | None = None
    name: str | None = None


class CreateLinkResponse(BaseModel):
    """Response after creating a link."""

    link_id: str
    link_url: str
    message: str = "Link generated successfully!"


class CreateLinkUseCase(BaseUseCase):
    """Use case for issuing a new invitation link."""

    def __init__(self, link_service: LinkService, settings: Settings) -> None:
        """Initialize use case.

        Args:
            link_service: Link domain service
            settings: Application settings
        """
        self.link_service = link_service
        self.settings = settings

    async def execute(self, request: CreateLinkRequest) -> CreateLinkResponse:
        """Create a link for the given recipient.

        Args:
            request: Create link request

        Returns:
            Response with the new link ID and shareable URL

        Raises:
            ValidationError: If email or name is invalid
        """
        with logfire.span("create_link"):
            link = await self.link_service.create_link(request.email, request.name)

            frontend_url = self.settings.api.frontend_url
            return CreateLinkResponse(
                link_id=link.id,
                link_url=f"{frontend_url}/date.html?id={link.id}",
            )
