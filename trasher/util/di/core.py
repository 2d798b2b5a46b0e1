"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from trasher.config import CensorSettings, QueueSettings, Settings, SiteSettings
from trasher.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_censor_settings(self, settings: Settings) -> CensorSettings:
        """Provide word list settings."""
        return settings.censor

    @provide(scope=Scope.APP)
    def provide_queue_settings(self, settings: Settings) -> QueueSettings:
        """Provide review queue settings."""
        return settings.queue

    @provide(scope=Scope.APP)
    def provide_site_settings(self, settings: Settings) -> SiteSettings:
        """Provide site settings."""
        return settings.site
