"""Q&A backend adapter."""

from .client import QABackendClient

__all__ = ["QABackendClient"]
