"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from scribe.config import AuthSettings, EmailSettings, Settings, StorageSettings
from scribe.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file once per
    process.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_storage_settings(self, settings: Settings) -> StorageSettings:
        return settings.storage

    @provide(scope=Scope.APP)
    def provide_email_settings(self, settings: Settings) -> EmailSettings:
        return settings.email
