"""Domain value objects for the Q&A forum."""

from forum.domain.value.identifiers import ContextId, QAItemId, UserId
from forum.domain.value.types import (
    AttachmentFile,
    AttachmentKind,
    Identity,
    Permissions,
)

__all__ = [
    # Identifiers
    "QAItemId",
    "UserId",
    "ContextId",
    # Types
    "AttachmentKind",
    "AttachmentFile",
    "Identity",
    "Permissions",
]
