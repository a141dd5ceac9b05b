"""Response notifier domain service."""

import asyncio
from collections.abc import Callable
from datetime import datetime

import logfire

from rsvp.domain.error import AlreadyAnsweredError, DeliveryError, ValidationError
from rsvp.domain.value import LinkResponse, Notification
from rsvp.util.logging import mask_email

from .base import Service, utcnow
from .link_service import LinkService
from .notification_templates import render_notification

CONFIRMATION_MESSAGE = "Notification sent successfully!"


class EmailSender:
    """Outbound email capability.

    Implementations return normally once the provider accepted the message
    and raise on any failure.
    """

    async def send(self, to: str, subject: str, html: str, text: str) -> None:
        """Send one email with HTML and plain-text bodies.

        Args:
            to: Recipient address
            subject: Subject line
            html: HTML body
            text: Plain-text body
        """
        raise NotImplementedError


class PendingResponses:
    """Link IDs whose answer is currently being delivered.

    Shared by every request so at most one answer per link is in flight.
    Reserving is synchronous, which makes it atomic on the event loop.
    """

    def __init__(self) -> None:
        self._link_ids: set[str] = set()

    def reserve(self, link_id: str) -> bool:
        """Claim ``link_id``; False if another answer already holds it."""
        if link_id in self._link_ids:
            return False
        self._link_ids.add(link_id)
        return True

    def release(self, link_id: str) -> None:
        self._link_ids.discard(link_id)

    def __contains__(self, link_id: str) -> bool:
        return link_id in self._link_ids


class NotificationService(Service):
    """Domain service that turns a response into exactly one notification email.

    The link records the response only after the email went out.
    """

    def __init__(
        self,
        link_service: LinkService,
        email_sender: EmailSender,
        timeout_seconds: float = 30.0,
        clock: Callable[[], datetime] = utcnow,
        pending: PendingResponses | None = None,
    ) -> None:
        """Initialize notification service.

        Args:
            link_service: Link registry service
            email_sender: Email capability
            timeout_seconds: Upper bound for one delivery attempt
            clock: Source of the current time
            pending: In-flight answers, shared across requests
        """
        self.link_service = link_service
        self.email_sender = email_sender
        self.timeout_seconds = timeout_seconds
        self.clock = clock
        self.pending = pending if pending is not None else PendingResponses()

    async def record_response(
        self,
        link_id: str | None,
        response: str | None,
        notify_email: str | None,
        notify_name: str | None,
    ) -> str:
        """Validate a response, send the notification, then record it.

        Args:
            link_id: Link being answered
            response: Literal "yes" or "no"
            notify_email: Where the notification goes
            notify_name: Responder's name used in the email

        Returns:
            User-facing confirmation message

        Raises:
            ValidationError: If any input is missing, contains line breaks,
                or response is not yes/no
            AlreadyAnsweredError: If the link already holds a response or
                another answer for it is being delivered
            DeliveryError: If the email could not be sent
        """
        if not (link_id and response and notify_email and notify_name):
            raise ValidationError("Missing required fields")

        try:
            answer = LinkResponse(response)
        except ValueError as e:
            raise ValidationError("Invalid response value") from e

        # Both values end up in email headers
        if any(c in value for value in (notify_email, notify_name) for c in "\r\n"):
            raise ValidationError("Email and name must not contain line breaks")

        with logfire.span(
            "notification_service.record_response",
            link_id=link_id,
            response=answer.value,
        ):
            # Reserve before the first await so concurrent answers cannot both pass
            if not self.pending.reserve(link_id):
                logfire.warn(
                    "Response rejected, another answer is in flight", link_id=link_id
                )
                raise AlreadyAnsweredError(link_id)

            try:
                existing = await self.link_service.find_link(link_id)
                if existing is not None and existing.is_answered:
                    logfire.warn(
                        "Response rejected, link already answered",
                        link_id=link_id,
                        existing=existing.response.value,
                    )
                    raise AlreadyAnsweredError(link_id)

                notification = render_notification(
                    answer, notify_email, notify_name, self.clock()
                )
                await self._deliver(link_id, notification)

                await self.link_service.record_response(link_id, answer)
                return CONFIRMATION_MESSAGE
            finally:
                self.pending.release(link_id)

    async def _deliver(self, link_id: str, notification: Notification) -> None:
        """Send through the email capability, mapping every failure to DeliveryError."""
        try:
            await asyncio.wait_for(
                self.email_sender.send(
                    notification.to,
                    notification.subject,
                    notification.html,
                    notification.text,
                ),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            message = f"Email delivery timed out after {self.timeout_seconds:g}s"
            logfire.error("Notification failed", link_id=link_id, error=message)
            raise DeliveryError(message) from e
        except Exception as e:
            logfire.error(
                "Notification failed",
                link_id=link_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise DeliveryError(str(e)) from e

        logfire.info(
            "Notification sent", link_id=link_id, to=mask_email(notification.to)
        )
