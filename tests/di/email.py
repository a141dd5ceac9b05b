"""Mock email providers for testing."""

from dishka import Scope, provide

from rsvp.adapter.email import MockEmailSender
from rsvp.domain.service import EmailSender
from rsvp.util.di.infrastructure.email import EmailProvider


class MockEmailProvider(EmailProvider):
    """Mock email provider recording messages instead of sending them."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_email_sender(self) -> EmailSender:
        """Provide mock email sender."""
        return MockEmailSender()
