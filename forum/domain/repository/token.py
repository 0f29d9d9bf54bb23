"""Token repository interface."""

from abc import ABC, abstractmethod
from typing import Optional


class TokenRepository(ABC):
    """Storage for the bearer token of the signed-in user.

    Issuing tokens is handled elsewhere; the forum only reads the token to
    authenticate requests and decode the current identity.
    """

    @abstractmethod
    async def get(self) -> Optional[str]:
        """Return the stored token, or None when signed out."""
        pass

    @abstractmethod
    async def set(self, token: str) -> None:
        """Store a token, replacing any previous one."""
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Remove the stored token."""
        pass
