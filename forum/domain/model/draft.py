"""Attachment draft for compose and edit sessions.

An item holds at most one attachment. While composing or editing, the user
can stage a new file or mark the existing attachment for removal, never both:
whichever action happens last wins.
"""

from enum import Enum
from typing import Optional

from forum.domain.model.common import DomainModel
from forum.domain.model.qa_item import Attachment
from forum.domain.value import AttachmentFile


class ChangeKind(str, Enum):
    """Outcome of an edit for the item's attachment."""

    UNCHANGED = "unchanged"
    REPLACE = "replace"
    REMOVE = "remove"


class AttachmentChange(DomainModel):
    """Attachment instruction sent with an update request."""

    kind: ChangeKind = ChangeKind.UNCHANGED
    file: Optional[AttachmentFile] = None

    @classmethod
    def unchanged(cls) -> "AttachmentChange":
        return cls()

    @classmethod
    def replace(cls, file: AttachmentFile) -> "AttachmentChange":
        return cls(kind=ChangeKind.REPLACE, file=file)

    @classmethod
    def remove(cls) -> "AttachmentChange":
        return cls(kind=ChangeKind.REMOVE)


class AttachmentDraft(DomainModel):
    """Attachment state of one compose or edit session.

    Every transition returns a new draft.
    """

    existing: Optional[Attachment] = None
    staged_file: Optional[AttachmentFile] = None
    marked_for_removal: bool = False

    def stage(self, file: AttachmentFile) -> "AttachmentDraft":
        """Stage a new file. Cancels a pending removal."""
        return self.model_copy(update={"staged_file": file, "marked_for_removal": False})

    def clear_staged(self) -> "AttachmentDraft":
        """Drop the staged file, keeping the existing attachment."""
        return self.model_copy(update={"staged_file": None})

    def mark_for_removal(self) -> "AttachmentDraft":
        """Mark the existing attachment for removal. Drops a staged file."""
        return self.model_copy(update={"staged_file": None, "marked_for_removal": True})

    def reset(self) -> "AttachmentDraft":
        """Discard all pending changes."""
        return AttachmentDraft(existing=self.existing)

    def change(self) -> AttachmentChange:
        """Resolve the draft into the instruction sent on submit.

        A staged file takes precedence over the removal flag.
        """
        if self.staged_file is not None:
            return AttachmentChange.replace(self.staged_file)
        if self.marked_for_removal:
            return AttachmentChange.remove()
        return AttachmentChange.unchanged()

    def display_label(self) -> Optional[str]:
        """Label shown next to the attachment controls of the edit form."""
        if self.staged_file is not None:
            return f"New: {self.staged_file.name}"
        if self.marked_for_removal:
            return "Attachment will be removed"
        if self.existing is not None:
            return f"Current: {self.existing.name}"
        return None
