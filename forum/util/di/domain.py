"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.config import PermissionSettings
from forum.domain.repository import TokenRepository
from forum.domain.service import IdentityService, PermissionService
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    @provide
    def get_identity_service(self, token_repository: TokenRepository) -> IdentityService:
        """Provide identity domain service."""
        return IdentityService(token_repository=token_repository)

    @provide
    def get_permission_service(
        self, permission_settings: PermissionSettings
    ) -> PermissionService:
        """Provide permission domain service."""
        return PermissionService(permission_settings=permission_settings)
