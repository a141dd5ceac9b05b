"""In-memory repository implementations."""

from .link import InMemoryLinkRepository

__all__ = [
    "InMemoryLinkRepository",
]
