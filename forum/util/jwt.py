"""JWT token utilities.

The forum client never holds the signing key. Tokens are decoded without
signature verification to read the identity claims for UI permission
pre-checks; the backend verifies the same token on every request.
"""

import jwt
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from forum.util.error import UtilError


class TokenPayload(BaseModel):
    """Identity claims carried by the bearer token."""

    model_config = ConfigDict(extra="ignore")

    user_id: str | None = None
    role: list[str] = []

    @field_validator("user_id", mode="before")
    @classmethod
    def coerce_user_id(cls, v: object) -> str | None:
        """Accept numeric ids and treat empty ids as missing."""
        if v is None or v == "":
            return None
        return str(v)

    @field_validator("role", mode="before")
    @classmethod
    def coerce_role(cls, v: object) -> object:
        """Accept a single role string as a one-element list."""
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return v


class TokenDecodeError(UtilError):
    """Raised when a token cannot be decoded."""

    pass


def decode_token(token: str) -> TokenPayload:
    """Decode a JWT token without verifying its signature.

    Args:
        token: Encoded JWT token

    Returns:
        Token payload

    Raises:
        TokenDecodeError: If the token is malformed or its claims are invalid
    """
    try:
        payload = jwt.decode(
            token,
            options={"verify_signature": False, "verify_exp": False},
        )
    except jwt.InvalidTokenError as e:
        raise TokenDecodeError(f"Invalid token: {e}")

    try:
        return TokenPayload(**payload)
    except ValidationError as e:
        raise TokenDecodeError(f"Invalid token claims: {e}")
