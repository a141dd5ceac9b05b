"""Link registry domain service."""

import secrets
from collections.abc import Callable
from datetime import datetime

import logfire
from pydantic import ValidationError as PydanticValidationError

from rsvp.domain.error import (
    DuplicateLinkError,
    ExpiredError,
    NotFoundError,
    ValidationError,
)
from rsvp.domain.model.link import Link
from rsvp.domain.repository import LinkRepository
from rsvp.domain.value import (
    EmailAddress,
    LinkDetails,
    LinkId,
    LinkResponse,
    RecipientName,
)
from rsvp.domain.value.common import first_error_message
from rsvp.util.logging import mask_email

from .base import Service, utcnow

# 16 random bytes, 22 URL-safe characters
TOKEN_BYTES = 16
MAX_ID_ATTEMPTS = 5


def generate_link_id() -> LinkId:
    """Generate a random, URL-safe link token."""
    return LinkId(secrets.token_urlsafe(TOKEN_BYTES))


class LinkService(Service):
    """Domain service that creates links and answers expiration-aware lookups."""

    def __init__(
        self,
        link_repository: LinkRepository,
        clock: Callable[[], datetime] = utcnow,
        id_factory: Callable[[], LinkId] = generate_link_id,
    ) -> None:
        """Initialize link service.

        Args:
            link_repository: Link repository
            clock: Source of the current time
            id_factory: Source of fresh link tokens
        """
        self.link_repository = link_repository
        self.clock = clock
        self.id_factory = id_factory

    async def create_link(self, email: str | None, name: str | None) -> Link:
        """Create and store a new link.

        Args:
            email: Recipient email, must contain "@"
            name: Recipient display name, must not be blank

        Returns:
            The stored link

        Raises:
            ValidationError: If email or name is invalid
        """
        with logfire.span("link_service.create_link"):
            try:
                recipient_email = EmailAddress(email)
                recipient_name = RecipientName(name)
            except PydanticValidationError as e:
                message = first_error_message(e)
                logfire.warn("Link creation rejected", reason=message)
                raise ValidationError(message) from e

            now = self.clock()
            for _ in range(MAX_ID_ATTEMPTS):
                link = Link.issue(
                    self.id_factory(), recipient_email, recipient_name, now
                )
                try:
                    saved = await self.link_repository.add(link)
                    break
                except DuplicateLinkError:
                    logfire.warn("Link ID collision, regenerating", link_id=link.id)
            else:
                raise RuntimeError(
                    f"Could not allocate a unique link ID after {MAX_ID_ATTEMPTS} attempts"
                )

            logfire.info(
                "Link created",
                link_id=saved.id,
                recipient=mask_email(saved.recipient_email.root),
                expires_at=saved.expires_at.isoformat(),
                total_links=await self.link_repository.count(),
            )
            return saved

    async def get_link(self, link_id: str | None) -> LinkDetails:
        """Resolve a link to its recipient's identity.

        Args:
            link_id: Link token

        Returns:
            Recipient name and email, never the response state

        Raises:
            ValidationError: If link_id is missing
            NotFoundError: If the link never existed
            ExpiredError: If the link existed but has lapsed
        """
        if not link_id:
            raise ValidationError("Link ID is required")

        with logfire.span("link_service.get_link", link_id=link_id):
            link = await self.link_repository.find_by_id(LinkId(link_id))
            if link is None:
                logfire.warn("Link not found", link_id=link_id)
                raise NotFoundError("Link", link_id)

            if link.is_expired(self.clock()):
                logfire.info(
                    "Link expired", link_id=link_id, expires_at=link.expires_at
                )
                raise ExpiredError("Link", link_id)

            return link.details()

    async def find_link(self, link_id: str) -> Link | None:
        """Look up a link without applying expiration.

        Args:
            link_id: Link token

        Returns:
            The link if it was ever created, None otherwise
        """
        return await self.link_repository.find_by_id(LinkId(link_id))

    async def record_response(
        self, link_id: str, response: LinkResponse
    ) -> Link | None:
        """Record a response on a link, best-effort.

        Missing or expired links are skipped. A link that already holds an
        answer keeps it.

        Args:
            link_id: Link token
            response: Response to record

        Returns:
            The updated link, or None if nothing was recorded
        """
        with logfire.span(
            "link_service.record_response",
            link_id=link_id,
            response=response.value,
        ):
            link = await self.link_repository.find_by_id(LinkId(link_id))
            now = self.clock()

            if link is None:
                logfire.warn("Response not recorded, link not found", link_id=link_id)
                return None
            if link.is_expired(now):
                logfire.warn("Response not recorded, link expired", link_id=link_id)
                return None
            if link.is_answered:
                logfire.warn(
                    "Response not recorded, link already answered",
                    link_id=link_id,
                    existing=link.response.value,
                )
                return None

            saved = await self.link_repository.save(link.answer(response, now))
            logfire.info(
                "Response recorded",
                link_id=link_id,
                response=response.value,
                responded_at=saved.responded_at,
            )
            return saved

    async def count_links(self) -> int:
        """Number of links in the registry, expired ones included."""
        return await self.link_repository.count()
