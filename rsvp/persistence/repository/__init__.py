"""Repository implementations."""

from rsvp.persistence.repository.inmemory import InMemoryLinkRepository

__all__ = [
    "InMemoryLinkRepository",
]
