"""Persistence infrastructure providers."""

from dishka import Scope, provide

from forum.config import Settings
from forum.domain.repository import TokenRepository
from forum.persistence.repository import FileTokenRepository
from forum.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider storing the token on disk."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_token_repository(self, settings: Settings) -> TokenRepository:
        """Provide file-backed token repository."""
        return FileTokenRepository(path=settings.token.path)
