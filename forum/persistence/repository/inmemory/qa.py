"""In-memory Q&A repository for testing.

Behaves like the REST backend: assigns ids and timestamps, reads the acting
user from the stored bearer token, and enforces the edit/delete windows on
its own instead of trusting the client.
"""

from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Optional
from uuid import uuid4

from forum.adapter.error import AuthorizationError, BackendError, ItemNotFoundError
from forum.config import PermissionSettings
from forum.domain.model.draft import AttachmentChange, ChangeKind
from forum.domain.model.qa_item import Attachment, QAItem
from forum.domain.repository.qa import QARepository
from forum.domain.repository.token import TokenRepository
from forum.domain.service.permission_service import compute_permissions, utc_now
from forum.domain.value import (
    AttachmentFile,
    AttachmentKind,
    ContextId,
    Identity,
    QAItemId,
    UserId,
)
from forum.util.jwt import TokenDecodeError, decode_token


class InMemoryQARepository(QARepository):
    """In-memory implementation of QARepository for testing."""

    def __init__(
        self,
        token_repository: TokenRepository,
        permission_settings: Optional[PermissionSettings] = None,
        organizer_ids: Optional[set[str]] = None,
        display_names: Optional[dict[str, str]] = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.token_repository = token_repository
        self.permission_settings = permission_settings or PermissionSettings()
        self.organizer_ids = organizer_ids or set()
        self.display_names = display_names or {}
        self.clock = clock
        # Items are stored flat, without replies, in creation order
        self._items: dict[QAItemId, QAItem] = {}
        self._contexts: dict[QAItemId, ContextId] = {}

    async def find_by_context(self, context_id: ContextId) -> list[QAItem]:
        """Build the nested tree of a discussion."""
        items = [
            item
            for item_id, item in self._items.items()
            if self._contexts[item_id] == context_id
        ]
        children: dict[Optional[QAItemId], list[QAItem]] = {}
        for item in items:
            children.setdefault(item.parent_id, []).append(item)

        def build(parent_id: Optional[QAItemId]) -> tuple[QAItem, ...]:
            return tuple(
                child.model_copy(update={"replies": build(child.id)})
                for child in children.get(parent_id, [])
            )

        # Questions come back newest first, replies oldest first
        return list(reversed(build(None)))

    async def create(
        self,
        context_id: ContextId,
        text: str,
        parent_id: Optional[QAItemId] = None,
        attachment: Optional[AttachmentFile] = None,
    ) -> QAItem:
        """Create a question or reply as the token holder."""
        identity = await self._require_identity()

        if parent_id is not None:
            parent = self._items.get(parent_id)
            if parent is None or self._contexts[parent_id] != context_id:
                raise ItemNotFoundError(404, "Parent question not found")

        if not text.strip() and attachment is None:
            raise BackendError(400, "Text or attachment is required")

        item_id = QAItemId(str(uuid4()))
        item = QAItem(
            id=item_id,
            parent_id=parent_id,
            author_id=identity.user_id,
            author_display_name=self.display_names.get(identity.user_id, identity.user_id),
            is_organizer=identity.user_id in self.organizer_ids,
            created_at=self.clock(),
            body_html=text,
            attachment=self._store_attachment(item_id, attachment),
        )
        self._items[item_id] = item
        self._contexts[item_id] = context_id
        return item

    async def update(
        self,
        item_id: QAItemId,
        context_id: ContextId,
        text: str,
        change: AttachmentChange,
    ) -> QAItem:
        """Update text and attachment if the token holder may edit."""
        item = self._get(item_id)
        identity = await self._require_identity()
        if not self._permissions(item, identity).can_edit:
            raise AuthorizationError(403, "You can no longer edit this item")

        attachment = item.attachment
        if change.kind == ChangeKind.REPLACE:
            attachment = self._store_attachment(item_id, change.file)
        elif change.kind == ChangeKind.REMOVE:
            attachment = None

        updated = item.model_copy(update={"body_html": text, "attachment": attachment})
        self._items[item_id] = updated
        return updated

    async def delete(self, item_id: QAItemId) -> None:
        """Delete an item and all of its descendants."""
        item = self._get(item_id)
        identity = await self._require_identity()
        if not self._permissions(item, identity).can_delete:
            raise AuthorizationError(403, "You can no longer delete this item")

        doomed = [item_id]
        while doomed:
            current = doomed.pop()
            self._items.pop(current, None)
            self._contexts.pop(current, None)
            doomed.extend(
                child.id for child in self._items.values() if child.parent_id == current
            )

    def _get(self, item_id: QAItemId) -> QAItem:
        item = self._items.get(item_id)
        if item is None:
            raise ItemNotFoundError(404, "Item not found")
        return item

    async def _require_identity(self) -> Identity:
        token = await self.token_repository.get()
        if not token:
            raise AuthorizationError(401, "Authentication required")
        try:
            payload = decode_token(token)
        except TokenDecodeError:
            raise AuthorizationError(401, "Invalid token")
        if payload.user_id is None:
            raise AuthorizationError(401, "Invalid token")
        return Identity(user_id=UserId(payload.user_id), roles=frozenset(payload.role))

    def _permissions(self, item: QAItem, identity: Identity):
        settings = self.permission_settings
        return compute_permissions(
            item,
            identity.user_id,
            identity.roles,
            self.clock(),
            edit_window=timedelta(minutes=settings.edit_window_minutes),
            delete_window=timedelta(minutes=settings.delete_window_minutes),
            admin_role=settings.admin_role,
        )

    @staticmethod
    def _store_attachment(
        item_id: QAItemId, file: Optional[AttachmentFile]
    ) -> Optional[Attachment]:
        if file is None:
            return None
        return Attachment(
            name=file.name,
            url=f"memory://attachments/{item_id}/{file.name}",
            kind=_attachment_kind(file),
        )


def _attachment_kind(file: AttachmentFile) -> AttachmentKind:
    if file.content_type.startswith("image/"):
        return AttachmentKind.IMAGE
    if file.content_type == "application/pdf" or file.name.lower().endswith(".pdf"):
        return AttachmentKind.PDF
    return AttachmentKind.DOC
