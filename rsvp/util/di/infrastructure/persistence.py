"""Persistence infrastructure providers."""

from dishka import Scope, provide
import logfire

from rsvp.domain.repository import LinkRepository
from rsvp.persistence.repository import InMemoryLinkRepository
from rsvp.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider.

    Links are kept in process memory. The store is APP-scoped: constructed
    once when the container starts and shared by every request.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_link_repository(self) -> LinkRepository:
        """Provide the process-wide link store."""
        logfire.info("In-memory link store created")
        return InMemoryLinkRepository()
