"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from depot.config import (
    AuthSettings,
    DatabaseSettings,
    FeedSettings,
    GitHubSettings,
    Settings,
)
from depot.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Config provider.

    Settings are loaded from environment variables and .env file.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_github_settings(self, settings: Settings) -> GitHubSettings:
        return settings.auth.github

    @provide
    def provide_database_settings(self, settings: Settings) -> DatabaseSettings:
        return settings.database

    @provide
    def provide_feed_settings(self, settings: Settings) -> FeedSettings:
        return settings.feed
