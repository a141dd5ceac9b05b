"""Application layer DI providers."""

from dishka import Scope, provide

from rsvp.application.usecase.link import CreateLinkUseCase, GetLinkUseCase
from rsvp.application.usecase.notification import SendNotificationUseCase
from rsvp.config import Settings
from rsvp.domain.service import LinkService, NotificationService
from rsvp.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Link use cases
    @provide(scope=Scope.REQUEST)
    def get_create_link_use_case(
        self, link_service: LinkService, settings: Settings
    ) -> CreateLinkUseCase:
        """Provide create link use case."""
        return CreateLinkUseCase(link_service=link_service, settings=settings)

    @provide(scope=Scope.REQUEST)
    def get_get_link_use_case(self, link_service: LinkService) -> GetLinkUseCase:
        """Provide get link use case."""
        return GetLinkUseCase(link_service=link_service)

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_send_notification_use_case(
        self, notification_service: NotificationService
    ) -> SendNotificationUseCase:
        """Provide send notification use case."""
        return SendNotificationUseCase(notification_service=notification_service)
