"""Domain repository interfaces."""

from forum.domain.repository.qa import QARepository
from forum.domain.repository.token import TokenRepository

__all__ = [
    "QARepository",
    "TokenRepository",
]
