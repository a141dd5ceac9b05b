"""Domain services."""

from .base import Service
from .link_service import LinkService
from .notification_service import EmailSender, NotificationService, PendingResponses

__all__ = [
    "EmailSender",
    "LinkService",
    "NotificationService",
    "PendingResponses",
    "Service",
]
