"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BackendSettings(BaseModel):
    """Q&A backend configuration."""

    # Includes the API prefix, e.g. https://api.example.com/api
    base_url: str = "http://localhost:8000/api"

    # Per-request timeout in seconds
    timeout: float = 30.0


class PermissionSettings(BaseModel):
    """Client-side edit/delete permission windows.

    These only gate what the UI offers. The backend enforces its own rules.
    """

    edit_window_minutes: float = 5
    delete_window_minutes: float = 30
    admin_role: str = "admin"


class TokenSettings(BaseModel):
    """Identity token storage configuration."""

    path: Path = Path.home() / ".forum" / "token"


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # If None, sends only when a token is present
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested values:

        BACKEND__BASE_URL=https://api.example.com/api
        PERMISSIONS__EDIT_WINDOW_MINUTES=5
        TOKEN__PATH=/var/lib/forum/token
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    backend: BackendSettings = BackendSettings()
    permissions: PermissionSettings = PermissionSettings()
    token: TokenSettings = TokenSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @computed_field
    @property
    def is_production(self) -> bool:
        """Whether this is a production deployment."""
        return self.environment == "production"
