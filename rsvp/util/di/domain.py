"""Domain layer DI providers."""

from dishka import Scope, provide

from rsvp.config import EmailSettings
from rsvp.domain.repository import LinkRepository
from rsvp.domain.service import (
    EmailSender,
    LinkService,
    NotificationService,
    PendingResponses,
)
from rsvp.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Services are REQUEST-scoped; the state they operate on lives in the
    APP-scoped repository and the APP-scoped set of in-flight answers.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_pending_responses(self) -> PendingResponses:
        """Provide the process-wide set of answers being delivered."""
        return PendingResponses()

    @provide
    def get_link_service(self, link_repository: LinkRepository) -> LinkService:
        """Provide link registry domain service."""
        return LinkService(link_repository=link_repository)

    @provide
    def get_notification_service(
        self,
        link_service: LinkService,
        email_sender: EmailSender,
        email_settings: EmailSettings,
        pending: PendingResponses,
    ) -> NotificationService:
        """Provide response notifier domain service."""
        return NotificationService(
            link_service=link_service,
            email_sender=email_sender,
            timeout_seconds=email_settings.timeout_seconds,
            pending=pending,
        )
