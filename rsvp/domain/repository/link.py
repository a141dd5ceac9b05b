"""Link repository interface."""

from abc import ABC, abstractmethod

from rsvp.domain.model.link import Link
from rsvp.domain.value import LinkId


class LinkRepository(ABC):
    """Repository for Link entity.

    Defines the contract for link storage operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, link_id: LinkId) -> Link | None:
        """Find a link by ID.

        Expiration is not applied here; callers decide what a lapsed
        link means for them.

        Args:
            link_id: The link's token

        Returns:
            The link if found, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, link: Link) -> Link:
        """Store a new link.

        Args:
            link: The link to store

        Returns:
            The stored link

        Raises:
            DuplicateLinkError: If a link with the same ID already exists
        """
        pass

    @abstractmethod
    async def save(self, link: Link) -> Link:
        """Replace an existing link.

        Args:
            link: The updated link

        Returns:
            The saved link

        Raises:
            NotFoundError: If no link with this ID exists
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count stored links, expired ones included."""
        pass
