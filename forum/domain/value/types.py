"""Domain value objects for the Q&A forum.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import Field, field_validator

from forum.domain.value.common import ValueObject
from forum.domain.value.identifiers import UserId


class AttachmentKind(str, Enum):
    """Kind of file attached to a question or reply."""

    IMAGE = "image"
    DOC = "doc"
    PDF = "pdf"


class AttachmentFile(ValueObject):
    """A local file staged for upload with a question, reply or edit."""

    name: str = Field(min_length=1, max_length=255)
    content: bytes
    content_type: str = "application/octet-stream"

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject names that are only whitespace."""
        if not v.strip():
            raise ValueError("File name must not be blank")
        return v

    @property
    def size(self) -> int:
        """File size in bytes."""
        return len(self.content)


class Identity(ValueObject):
    """The current user as decoded from the bearer token.

    An anonymous identity has no user id and no roles.
    """

    user_id: UserId | None = None
    roles: frozenset[str] = frozenset()

    @classmethod
    def anonymous(cls) -> "Identity":
        """Identity used when no valid token is available."""
        return cls()

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    def has_role(self, role: str) -> bool:
        return role in self.roles


class Permissions(ValueObject):
    """What the current user may do with one item."""

    can_edit: bool = False
    can_delete: bool = False
    is_author: bool = False
    is_admin: bool = False

    @classmethod
    def none(cls) -> "Permissions":
        return cls()
