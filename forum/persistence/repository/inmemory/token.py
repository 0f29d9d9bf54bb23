"""In-memory token repository for testing."""

from typing import Optional

from forum.domain.repository.token import TokenRepository


class InMemoryTokenRepository(TokenRepository):
    """In-memory implementation of TokenRepository for testing."""

    def __init__(self, token: Optional[str] = None) -> None:
        self._token = token

    async def get(self) -> Optional[str]:
        return self._token

    async def set(self, token: str) -> None:
        self._token = token

    async def clear(self) -> None:
        self._token = None
