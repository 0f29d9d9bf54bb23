"""File-backed token repository."""

from pathlib import Path
from typing import Optional

import logfire

from forum.domain.repository.token import TokenRepository


class FileTokenRepository(TokenRepository):
    """Keeps the bearer token in a file so it survives restarts."""

    def __init__(self, path: Path) -> None:
        self.path = path

    async def get(self) -> Optional[str]:
        """Return the stored token.

        A missing, empty or unreadable file means no token; the caller then
        acts as the anonymous user.
        """
        if not self.path.exists():
            return None
        try:
            token = self.path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as e:
            logfire.warn(
                "Token file unreadable, treating as signed out",
                path=str(self.path),
                error=str(e),
            )
            return None
        return token or None

    async def set(self, token: str) -> None:
        """Write the token, creating parent directories as needed."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(token, encoding="utf-8")
        # Owner-only, the token authenticates every request
        self.path.chmod(0o600)
        logfire.info("Token stored", path=str(self.path))

    async def clear(self) -> None:
        self.path.unlink(missing_ok=True)
        logfire.info("Token cleared", path=str(self.path))
