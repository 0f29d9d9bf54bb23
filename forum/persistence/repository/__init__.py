"""Persistence repositories."""

from forum.persistence.repository.token import FileTokenRepository

__all__ = ["FileTokenRepository"]
