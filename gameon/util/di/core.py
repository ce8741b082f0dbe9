"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from gameon.config import AuthSettings, GameSettings, RatingSettings, Settings
from gameon.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
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
    def provide_game_settings(self, settings: Settings) -> GameSettings:
        """Provide game scheduling settings."""
        return settings.games

    @provide(scope=Scope.APP)
    def provide_rating_settings(self, settings: Settings) -> RatingSettings:
        """Provide rating settings."""
        return settings.ratings
