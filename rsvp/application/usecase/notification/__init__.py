"""Notification use cases."""

from rsvp.application.usecase.notification.send_notification import (
    SendNotificationRequest,
    SendNotificationResponse,
    SendNotificationUseCase,
)

__all__ = [
    "SendNotificationRequest",
    "SendNotificationResponse",
    "SendNotificationUseCase",
]
