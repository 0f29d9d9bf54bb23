"""Mock persistence providers for testing."""

from dishka import Scope, provide

from forum.domain.repository import TokenRepository
from forum.persistence.repository.inmemory import InMemoryTokenRepository
from forum.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider keeping the token in memory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_token_repository(self) -> TokenRepository:
        """Provide in-memory token repository."""
        return InMemoryTokenRepository()
