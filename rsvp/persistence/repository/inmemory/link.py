"""In-memory link repository.

Links live only as long as the process; one instance is shared by all
requests through the DI container.
"""

from typing import Optional

from rsvp.domain.error import DuplicateLinkError, NotFoundError
from rsvp.domain.model.link import Link
from rsvp.domain.repository.link import LinkRepository
from rsvp.domain.value import LinkId


class InMemoryLinkRepository(LinkRepository):
    """Dict-backed implementation of LinkRepository."""

    def __init__(self) -> None:
        self._links: dict[LinkId, Link] = {}

    async def find_by_id(self, link_id: LinkId) -> Optional[Link]:
        """Find a link by ID."""
        return self._links.get(link_id)

    async def add(self, link: Link) -> Link:
        """Store a new link.

        Raises:
            DuplicateLinkError: If the ID is already taken
        """
        if link.id in self._links:
            raise DuplicateLinkError(link.id)
        self._links[link.id] = link
        return link

    async def save(self, link: Link) -> Link:
        """Replace an existing link.

        The first recorded response wins; a save that would overwrite it
        keeps the stored link.

        Raises:
            NotFoundError: If the link was never added
        """
        existing = self._links.get(link.id)
        if existing is None:
            raise NotFoundError("Link", link.id)
        if existing.is_answered:
            return existing
        self._links[link.id] = link
        return link

    async def count(self) -> int:
        """Count stored links."""
        return len(self._links)
