"""Domain models."""

from forum.domain.model.draft import AttachmentChange, AttachmentDraft, ChangeKind
from forum.domain.model.qa_item import Attachment, Forest, QAItem

__all__ = [
    "Attachment",
    "AttachmentChange",
    "AttachmentDraft",
    "ChangeKind",
    "Forest",
    "QAItem",
]
