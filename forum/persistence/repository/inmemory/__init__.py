"""In-memory repositories for testing and offline use."""

from .qa import InMemoryQARepository
from .token import InMemoryTokenRepository

__all__ = [
    "InMemoryQARepository",
    "InMemoryTokenRepository",
]
