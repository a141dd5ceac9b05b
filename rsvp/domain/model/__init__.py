"""Domain model entities for RSVP links."""

from rsvp.domain.model.link import LINK_TTL, Link

__all__ = [
    "LINK_TTL",
    "Link",
]
