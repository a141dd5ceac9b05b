"""Send notification use case."""

from pydantic import BaseModel

from rsvp.application.usecase.base import BaseUseCase
from rsvp.domain.service import NotificationService


class SendNotificationRequest(BaseModel):
    """Response submitted from a link page."""

    link_id: str | None = None
    response: str | None = None
    email: str | None = None
    name: str | None = None


class SendNotificationResponse(BaseModel):
    """Outcome of a delivered notification."""

    success: bool = True
    message: str


class SendNotificationUseCase(BaseUseCase):
    """Use case for answering a link and notifying its creator."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize send notification use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(
        self, request: SendNotificationRequest
    ) -> SendNotificationResponse:
        """Send the notification and record the response.

        Raises:
            ValidationError: If fields are missing or response is not yes/no
            AlreadyAnsweredError: If the link was answered before
            DeliveryError: If the email could not be sent
        """
        message = await self.notification_service.record_response(
            link_id=request.link_id,
            response=request.response,
            notify_email=request.email,
            notify_name=request.name,
        )
        return SendNotificationResponse(message=message)
