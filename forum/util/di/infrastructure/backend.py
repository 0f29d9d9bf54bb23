"""Q&A backend infrastructure providers."""

from dishka import Scope, provide

from forum.adapter.backend import QABackendClient
from forum.config import BackendSettings
from forum.domain.repository import QARepository, TokenRepository
from forum.util.di.base import ProviderBase
from forum.util.error import ConfigurationError


class BackendProvider(ProviderBase):
    """Backend component base."""

    __mock_component__ = "backend"


class ProdBackendProvider(BackendProvider):
    """Production backend provider talking to the REST API."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_qa_repository(
        self, backend_settings: BackendSettings, token_repository: TokenRepository
    ) -> QARepository:
        """Provide HTTP Q&A repository.

        Raises:
            ConfigurationError: If no backend URL is configured
        """
        if not backend_settings.base_url:
            raise ConfigurationError("BACKEND__BASE_URL must be set")

        return QABackendClient(
            base_url=backend_settings.base_url,
            token_repository=token_repository,
            timeout=backend_settings.timeout,
        )
