"""Application layer DI providers."""

from dishka import Scope, provide

from trasher.application.usecase.moderation import (
    GetQueueUseCase,
    ModerateCommentUseCase,
)
from trasher.config import SiteSettings
from trasher.domain.service import ModerationService
from trasher.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_get_queue_use_case(
        self, moderation_service: ModerationService, site_settings: SiteSettings
    ) -> GetQueueUseCase:
        """Provide get queue use case."""
        return GetQueueUseCase(
            moderation_service=moderation_service, site_settings=site_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_moderate_comment_use_case(
        self, moderation_service: ModerationService
    ) -> ModerateCommentUseCase:
        """Provide moderate comment use case."""
        return ModerateCommentUseCase(moderation_service=moderation_service)
