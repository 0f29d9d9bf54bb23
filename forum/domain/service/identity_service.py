"""Identity domain service."""

import logfire

from forum.domain.repository import TokenRepository
from forum.domain.value import Identity, UserId
from forum.util.jwt import TokenDecodeError, decode_token

from .base import Service


class IdentityService(Service):
    """Resolves the current user from the stored bearer token."""

    def __init__(self, token_repository: TokenRepository) -> None:
        """Initialize identity service.

        Args:
            token_repository: Storage holding the bearer token
        """
        self.token_repository = token_repository

    def resolve(self, token: str | None) -> Identity:
        """Decode a token into an identity without raising.

        A missing or malformed token yields the anonymous identity, so every
        permission check comes out negative.

        Args:
            token: Bearer token (optional)

        Returns:
            Identity of the token holder, or anonymous
        """
        if not token:
            return Identity.anonymous()

        try:
            payload = decode_token(token)
        except TokenDecodeError as e:
            logfire.warn("Failed to decode token, treating as anonymous", error=str(e))
            return Identity.anonymous()

        if payload.user_id is None:
            logfire.warn("Token has no user_id claim, treating as anonymous")
            return Identity.anonymous()

        return Identity(user_id=UserId(payload.user_id), roles=frozenset(payload.role))

    async def current_identity(self) -> Identity:
        """Resolve the identity from the stored token.

        Returns:
            Identity of the signed-in user, or anonymous
        """
        with logfire.span("identity_service.current_identity"):
            token = await self.token_repository.get()
            identity = self.resolve(token)
            logfire.info(
                "Identity resolved",
                authenticated=identity.is_authenticated,
                user_id=identity.user_id,
                roles=sorted(identity.roles),
            )
            return identity
