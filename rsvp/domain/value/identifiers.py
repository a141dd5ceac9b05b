"""Strongly typed identifiers for RSVP domain entities.

Using NewType for strong typing prevents mixing up link tokens with other
strings and makes the code more self-documenting.
"""

from typing import NewType

# Opaque URL-safe token, the sole lookup key of a link
LinkId = NewType("LinkId", str)
