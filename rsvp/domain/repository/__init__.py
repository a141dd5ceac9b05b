"""Repository interfaces for the RSVP domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from rsvp.domain.repository.link import LinkRepository

__all__ = [
    "LinkRepository",
]
