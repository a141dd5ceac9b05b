"""Email sender implementations that need no external service."""

from dataclasses import dataclass

import logfire

from rsvp.adapter.error import EmailDeliveryError
from rsvp.domain.service.notification_service import EmailSender


@dataclass(frozen=True)
class SentEmail:
    """An email captured by MockEmailSender."""

    to: str
    subject: str
    html: str
    text: str


class UnconfiguredEmailSender(EmailSender):
    """Sender used when no credentials are configured.

    Lets the service start without credentials; every send fails with an
    explanation instead.
    """

    MESSAGE = (
        "Email is not configured: set EMAIL__API_KEY or "
        "EMAIL__USER and EMAIL__PASSWORD"
    )

    async def send(self, to: str, subject: str, html: str, text: str) -> None:
        """Always fail.

        Raises:
            EmailDeliveryError: Always
        """
        logfire.warn("Email send attempted without credentials")
        raise EmailDeliveryError(self.MESSAGE)


class MockEmailSender(EmailSender):
    """Mock email sender for testing.

    Records every message instead of sending it. Set ``fail_with`` to make
    sends raise.
    """

    def __init__(self, fail_with: str | None = None) -> None:
        """Initialize mock sender.

        Args:
            fail_with: Error message to raise on send, None to succeed
        """
        self.fail_with = fail_with
        self.sent: list[SentEmail] = []

    async def send(self, to: str, subject: str, html: str, text: str) -> None:
        """Record the email, or raise if configured to fail.

        Raises:
            EmailDeliveryError: If fail_with is set
        """
        if self.fail_with is not None:
            raise EmailDeliveryError(self.fail_with)
        self.sent.append(SentEmail(to=to, subject=subject, html=html, text=text))
