"""Email infrastructure providers."""

from dishka import Scope, provide

from rsvp.adapter.email import (
    SendGridEmailSender,
    SmtpEmailSender,
    UnconfiguredEmailSender,
)
from rsvp.config import EmailSettings
from rsvp.domain.service import EmailSender
from rsvp.util.di.base import ProviderBase


def build_email_sender(email_settings: EmailSettings) -> EmailSender:
    """Pick the email transport from the configured credentials.

    API key -> SendGrid, user/password -> SMTP, nothing -> a sender that
    fails every send.

    Args:
        email_settings: Email configuration

    Returns:
        Email sender
    """
    if email_settings.has_api_key:
        return SendGridEmailSender(
            api_key=email_settings.api_key,
            from_email=email_settings.sender_address or "",
            from_name=email_settings.from_name,
            timeout=email_settings.timeout_seconds,
        )

    if email_settings.has_smtp_credentials:
        return SmtpEmailSender(
            host=email_settings.smtp_host,
            port=email_settings.smtp_port,
            username=email_settings.user,
            password=email_settings.password,
            from_email=email_settings.from_email,
            from_name=email_settings.from_name,
            use_ssl=email_settings.use_ssl,
            timeout=email_settings.timeout_seconds,
        )

    return UnconfiguredEmailSender()


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_email_sender(self, email_settings: EmailSettings) -> EmailSender:
        """Provide the configured email sender."""
        return build_email_sender(email_settings)
