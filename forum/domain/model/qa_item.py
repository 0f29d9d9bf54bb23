"""Q&A item entity.

Questions and replies share one shape. A question has no parent; a reply
points at the item it answers. Replies nest with unlimited depth and are
carried inline, so a loaded discussion is a forest of item trees.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, field_validator

from forum.domain.model.common import DomainModel
from forum.domain.value import AttachmentKind, QAItemId, UserId


class Attachment(DomainModel):
    """A file already stored by the backend for an item."""

    name: str
    url: str
    kind: AttachmentKind = Field(alias="type")


class QAItem(DomainModel):
    """Question or reply node.

    Field aliases match the backend's JSON keys:
    - author: display name snapshotted when the item was created
    - isOrganizer: author is an organizer of this discussion
    - timestamp: creation time
    - text: rich-text body (HTML)
    """

    id: QAItemId
    parent_id: Optional[QAItemId] = None
    author_id: UserId
    author_display_name: str = Field(alias="author")
    is_organizer: bool = Field(default=False, alias="isOrganizer")
    created_at: datetime = Field(alias="timestamp")
    body_html: str = Field(default="", alias="text")
    attachment: Optional[Attachment] = None
    replies: tuple["QAItem", ...] = ()

    @field_validator("id", "parent_id", "author_id", mode="before")
    @classmethod
    def coerce_identifier(cls, v: object) -> object:
        """Backends may send numeric ids; ids are opaque strings here."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("replies", mode="before")
    @classmethod
    def default_replies(cls, v: object) -> object:
        """Update responses omit replies or send null."""
        return () if v is None else v

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """Treat naive timestamps as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @property
    def is_question(self) -> bool:
        return self.parent_id is None

    def to_wire(self) -> dict:
        """Serialize using the backend's JSON keys."""
        return self.model_dump(mode="json", by_alias=True)


Forest = tuple[QAItem, ...]
