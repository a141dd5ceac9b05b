"""SMTP email sender.

Uses a user/password pair, e.g. a Gmail account with an app password.
smtplib is blocking, so each send runs in a worker thread.
"""

import asyncio
import smtplib
import ssl
from email.message import EmailMessage
from email.utils import formataddr

import logfire

from rsvp.adapter.error import EmailDeliveryError
from rsvp.domain.service.notification_service import EmailSender


class SmtpEmailSender(EmailSender):
    """Email sender backed by an SMTP server."""

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        from_email: str | None = None,
        from_name: str | None = None,
        use_ssl: bool = False,
        timeout: float = 30.0,
    ) -> None:
        """Initialize SMTP sender.

        Args:
            host: SMTP server hostname
            port: SMTP server port (587 for STARTTLS, 465 for SSL)
            username: Authentication username
            password: Authentication password
            from_email: Sender address, defaults to username
            from_name: Sender display name
            use_ssl: Connect with implicit TLS instead of STARTTLS
            timeout: Socket timeout in seconds
        """
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.from_email = from_email or username
        self.from_name = from_name
        self.use_ssl = use_ssl
        self.timeout = timeout

    def build_message(
        self, to: str, subject: str, html: str, text: str
    ) -> EmailMessage:
        """Build a multipart/alternative message with text and HTML parts."""
        message = EmailMessage()
        if self.from_name:
            message["From"] = formataddr((self.from_name, self.from_email))
        else:
            message["From"] = self.from_email
        message["To"] = to
        message["Subject"] = subject
        message.set_content(text)
        message.add_alternative(html, subtype="html")
        return message

    def _send_sync(self, message: EmailMessage) -> None:
        context = ssl.create_default_context()
        if self.use_ssl:
            with smtplib.SMTP_SSL(
                self.host, self.port, timeout=self.timeout, context=context
            ) as server:
                server.login(self.username, self.password)
                server.send_message(message)
        else:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
                server.starttls(context=context)
                server.login(self.username, self.password)
                server.send_message(message)

    async def send(self, to: str, subject: str, html: str, text: str) -> None:
        """Send an email over SMTP.

        Raises:
            EmailDeliveryError: On invalid headers, authentication, protocol or
                connection errors
        """
        try:
            message = self.build_message(to, subject, html, text)
        except ValueError as e:
            raise EmailDeliveryError(f"Invalid message headers: {e}") from e

        try:
            await asyncio.to_thread(self._send_sync, message)
        except smtplib.SMTPAuthenticationError as e:
            raise EmailDeliveryError(f"SMTP authentication failed: {e}") from e
        except (smtplib.SMTPException, OSError) as e:
            raise EmailDeliveryError(f"SMTP error: {e}") from e

        logfire.info("SMTP accepted email", host=self.host)
