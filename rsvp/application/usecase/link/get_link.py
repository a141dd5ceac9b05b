"""Get link use case."""

from pydantic import BaseModel

from rsvp.application.usecase.base import BaseUseCase
from rsvp.domain.service import LinkService


class GetLinkRequest(BaseModel):
    """Get link request."""

    link_id: str | None = None


class GetLinkResponse(BaseModel):
    """Recipient identity behind a link."""

    name: str
    email: str


class GetLinkUseCase(BaseUseCase):
    """Use case for resolving a link to the recipient it was made for."""

    def __init__(self, link_service: LinkService) -> None:
        """Initialize get link use case.

        Args:
            link_service: Link domain service
        """
        self.link_service = link_service

    async def execute(self, request: GetLinkRequest) -> GetLinkResponse:
        """Resolve the link.

        Raises:
            ValidationError: If no link ID was given
            NotFoundError: If the link never existed
            ExpiredError: If the link has lapsed
        """
        details = await self.link_service.get_link(request.link_id)
        return GetLinkResponse(name=details.name, email=details.email)
