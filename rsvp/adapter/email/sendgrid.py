"""SendGrid email sender.

Delivers through SendGrid's v3 Mail Send API with an API key.
"""

import httpx
import logfire

from rsvp.adapter.error import EmailDeliveryError
from rsvp.domain.service.notification_service import EmailSender

SENDGRID_SEND_URL = "https://api.sendgrid.com/v3/mail/send"


class SendGridEmailSender(EmailSender):
    """Email sender backed by the SendGrid HTTP API."""

    def __init__(
        self,
        api_key: str,
        from_email: str,
        from_name: str | None = None,
        send_url: str = SENDGRID_SEND_URL,
        timeout: float = 30.0,
    ) -> None:
        """Initialize SendGrid sender.

        Args:
            api_key: SendGrid API key
            from_email: Verified sender address
            from_name: Sender display name
            send_url: Mail Send endpoint
            timeout: HTTP timeout in seconds
        """
        self.api_key = api_key
        self.from_email = from_email
        self.from_name = from_name
        self.send_url = send_url
        self.timeout = timeout

    def _build_payload(self, to: str, subject: str, html: str, text: str) -> dict:
        """Build the Mail Send request body."""
        sender = {"email": self.from_email}
        if self.from_name:
            sender["name"] = self.from_name

        return {
            "personalizations": [{"to": [{"email": to}]}],
            "from": sender,
            "subject": subject,
            # text/plain must come before text/html
            "content": [
                {"type": "text/plain", "value": text},
                {"type": "text/html", "value": html},
            ],
        }

    async def send(self, to: str, subject: str, html: str, text: str) -> None:
        """Send an email through SendGrid.

        Raises:
            EmailDeliveryError: On a missing sender address, transport errors
                or a non-2xx response
        """
        if not self.from_email:
            raise EmailDeliveryError(
                "SendGrid sender address is not configured: set EMAIL__FROM_EMAIL"
            )

        payload = self._build_payload(to, subject, html, text)
        headers = {"Authorization": f"Bearer {self.api_key}"}

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.send_url, json=payload, headers=headers
                )
        except httpx.HTTPError as e:
            raise EmailDeliveryError(f"SendGrid request failed: {e}") from e

        if not response.is_success:
            logfire.error(
                "SendGrid rejected email",
                status_code=response.status_code,
                body=response.text[:500],
            )
            raise EmailDeliveryError(
                f"SendGrid returned status {response.status_code}: {response.text}"
            )

        logfire.info(
            "SendGrid accepted email",
            status_code=response.status_code,
            message_id=response.headers.get("X-Message-Id"),
        )
