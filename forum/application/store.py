"""Forum store.

Owns the forest of one discussion and keeps it in step with the backend.
The forest changes only after the backend confirms an action, and only by
replacing it with a new forest built from the old one. Failures never touch
the forest; they become notifications instead.

Actions run as coroutines on one event loop. Each action has its own
in-flight key, so a slow reply does not hold up a question or a reply to
another item. Two replies to the same parent land in the order their
responses arrive.
"""

from collections import Counter
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from enum import Enum
from typing import Optional

import logfire
from pydantic import BaseModel

from forum.adapter.error import AdapterError, BackendError
from forum.application.usecase.qa import (
    CreateItemRequest,
    CreateItemUseCase,
    DeleteItemRequest,
    DeleteItemUseCase,
    LoadForumRequest,
    LoadForumUseCase,
    UpdateItemRequest,
    UpdateItemUseCase,
)
from forum.application.view import ForumView, render_forum
from forum.domain.error import NotAuthorizedError, ValidationError
from forum.domain.model.draft import AttachmentDraft
from forum.domain.model.qa_item import Forest, QAItem
from forum.domain.service import IdentityService, PermissionService, tree
from forum.domain.value import AttachmentFile, ContextId, Identity, Permissions, QAItemId

GENERIC_FAILURE = "Something went wrong. Please try again."

LOAD_KEY = "load"
QUESTION_KEY = "question"


def reply_key(parent_id: str) -> str:
    return f"reply:{parent_id}"


def update_key(item_id: str) -> str:
    return f"update:{item_id}"


def delete_key(item_id: str) -> str:
    return f"delete:{item_id}"


class NotificationVariant(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"
    NOTICE = "notice"  # Inline validation hint


class Notification(BaseModel):
    """A dismissable message for the user."""

    variant: NotificationVariant = NotificationVariant.DEFAULT
    title: str
    description: str


class ForumStore:
    """State holder for one discussion's Q&A forum."""

    def __init__(
        self,
        context_id: ContextId,
        load_forum_use_case: LoadForumUseCase,
        create_item_use_case: CreateItemUseCase,
        update_item_use_case: UpdateItemUseCase,
        delete_item_use_case: DeleteItemUseCase,
        identity_service: IdentityService,
        permission_service: PermissionService,
    ) -> None:
        """Initialize forum store.

        Args:
            context_id: Discussion (collaboration) ID
            load_forum_use_case: Fetches the tree
            create_item_use_case: Posts questions and replies
            update_item_use_case: Edits items
            delete_item_use_case: Deletes items
            identity_service: Resolves the current user
            permission_service: Computes advisory permissions
        """
        self.context_id = context_id
        self.load_forum_use_case = load_forum_use_case
        self.create_item_use_case = create_item_use_case
        self.update_item_use_case = update_item_use_case
        self.delete_item_use_case = delete_item_use_case
        self.identity_service = identity_service
        self.permission_service = permission_service

        self.forest: Forest = ()
        self.loading = True
        self.identity = Identity.anonymous()
        self.notifications: list[Notification] = []
        self.replying_to: Optional[QAItemId] = None
        self.delete_target: Optional[QAItemId] = None
        self._pending: Counter[str] = Counter()

    # Loading

    async def load(self) -> Forest:
        """Fetch the tree and replace the forest with it.

        On failure the previous forest stays and a notification is queued.
        """
        with self._track(LOAD_KEY):
            self.loading = True
            try:
                self.identity = await self.identity_service.current_identity()
                response = await self.load_forum_use_case.execute(
                    LoadForumRequest(context_id=self.context_id)
                )
                self.forest = tuple(response.items)
            except AdapterError as e:
                logfire.error(
                    "Failed to load forum", context_id=self.context_id, error=str(e)
                )
                self._notify_failure(
                    "Error", e, "Failed to load the Q&A. Please try again later."
                )
            finally:
                self.loading = False
        return self.forest

    async def refresh_identity(self) -> Identity:
        """Re-read the current user, e.g. after signing in or out."""
        self.identity = await self.identity_service.current_identity()
        return self.identity

    # Posting

    async def post_question(
        self, text: str, attachment: Optional[AttachmentFile] = None
    ) -> Optional[QAItem]:
        """Post a new question; it appears at the top of the forest.

        Returns:
            The created question, or None if posting failed
        """
        with self._track(QUESTION_KEY):
            try:
                response = await self.create_item_use_case.execute(
                    CreateItemRequest(
                        context_id=self.context_id, text=text, attachment=attachment
                    )
                )
            except ValidationError as e:
                self._notify_notice(e)
                return None
            except AdapterError as e:
                self._notify_failure(
                    "Post failed", e, "Failed to post the question. Please try again later."
                )
                return None

        if tree.contains(self.forest, response.item.id):
            # A load finished meanwhile and already brought the question in
            logfire.debug("Question already in forest", item_id=response.item.id)
            return response.item
        self.forest = tree.insert_question(self.forest, response.item)
        return response.item

    async def add_reply(
        self,
        parent_id: QAItemId,
        text: str,
        attachment: Optional[AttachmentFile] = None,
    ) -> Optional[QAItem]:
        """Reply to an item at any depth.

        The reply form closes on submit unless the reply is empty. The reply
        is inserted when the backend confirms it, even if another form has
        been opened since.

        Returns:
            The created reply, or None if posting failed
        """
        if self.replying_to == parent_id and (text.strip() or attachment is not None):
            self.replying_to = None

        with self._track(reply_key(parent_id)):
            try:
                response = await self.create_item_use_case.execute(
                    CreateItemRequest(
                        context_id=self.context_id,
                        text=text,
                        parent_id=parent_id,
                        attachment=attachment,
                    )
                )
            except ValidationError as e:
                self._notify_notice(e)
                return None
            except AdapterError as e:
                self._notify_failure(
                    "Reply failed", e, "Failed to post the reply. Please try again later."
                )
                return None

        if not tree.contains(self.forest, parent_id):
            # Parent vanished locally (e.g. deleted meanwhile); next load shows the reply
            logfire.warn(
                "Reply parent not in forest, reply not inserted",
                parent_id=parent_id,
                item_id=response.item.id,
            )
        self.forest = tree.insert_reply(self.forest, parent_id, response.item)
        return response.item

    # Editing

    async def update_item(
        self, item_id: QAItemId, text: str, draft: Optional[AttachmentDraft] = None
    ) -> Optional[QAItem]:
        """Save an edit, keeping the item's replies.

        Returns:
            The updated item, or None if the edit failed
        """
        item = tree.find_node(self.forest, item_id)
        if draft is None:
            draft = AttachmentDraft(existing=item.attachment if item else None)

        with self._track(update_key(item_id)):
            try:
                if item is not None and not self.permission_service.can_edit(
                    item, self.identity
                ):
                    raise NotAuthorizedError("edit", item_id, self.identity.user_id)
                response = await self.update_item_use_case.execute(
                    UpdateItemRequest(
                        item_id=item_id,
                        context_id=self.context_id,
                        text=text,
                        draft=draft,
                    )
                )
            except NotAuthorizedError as e:
                logfire.warn("Edit blocked client-side", item_id=item_id, error=str(e))
                self._notify(
                    NotificationVariant.DESTRUCTIVE,
                    "Update failed",
                    "You can no longer edit this item.",
                )
                return None
            except ValidationError as e:
                self._notify_notice(e)
                return None
            except BackendError as e:
                self._notify_failure("Update failed", e, GENERIC_FAILURE)
                return None
            except AdapterError as e:
                self._notify_failure(
                    "Error", e, "Failed to update the item. Please try again later."
                )
                return None

        self.forest = tree.update_node(self.forest, response.item)
        self._notify(
            NotificationVariant.DEFAULT,
            "Updated successfully",
            "Your item has been updated.",
        )
        return response.item

    # Deleting

    def request_delete(self, item_id: QAItemId) -> None:
        """Open the delete confirmation for an item."""
        self.delete_target = item_id

    def cancel_delete(self) -> None:
        self.delete_target = None

    async def confirm_delete(self) -> bool:
        """Delete the item awaiting confirmation.

        The confirmation closes whatever the outcome.
        """
        if self.delete_target is None:
            return False
        try:
            return await self.delete_item(self.delete_target)
        finally:
            self.delete_target = None

    async def delete_item(self, item_id: QAItemId) -> bool:
        """Delete an item and its replies.

        Returns:
            True if the backend confirmed the deletion
        """
        item = tree.find_node(self.forest, item_id)

        with self._track(delete_key(item_id)):
            try:
                if item is not None and not self.permission_service.can_delete(
                    item, self.identity
                ):
                    raise NotAuthorizedError("delete", item_id, self.identity.user_id)
                await self.delete_item_use_case.execute(DeleteItemRequest(item_id=item_id))
            except NotAuthorizedError as e:
                logfire.warn("Delete blocked client-side", item_id=item_id, error=str(e))
                self._notify(
                    NotificationVariant.DESTRUCTIVE,
                    "Delete failed",
                    "You can no longer delete this item.",
                )
                return False
            except BackendError as e:
                self._notify_failure("Delete failed", e, GENERIC_FAILURE)
                return False
            except AdapterError as e:
                self._notify_failure(
                    "Error", e, "Failed to delete the question. Please try again later."
                )
                return False

        self.forest = tree.delete_node(self.forest, item_id)
        if self.replying_to is not None and not tree.contains(self.forest, self.replying_to):
            self.replying_to = None
        self._notify(
            NotificationVariant.DEFAULT,
            "Deleted successfully",
            "The question has been removed.",
        )
        return True

    # Reply form

    def open_reply(self, item_id: QAItemId) -> None:
        """Open the reply form under an item, closing any other."""
        self.replying_to = item_id

    def close_reply(self) -> None:
        self.replying_to = None

    # Queries

    def is_pending(self, key: str) -> bool:
        """Whether the action with this key is in flight."""
        return self._pending[key] > 0

    def permissions_for(
        self, item_id: QAItemId, now: Optional[datetime] = None
    ) -> Permissions:
        item = tree.find_node(self.forest, item_id)
        if item is None:
            return Permissions.none()
        return self.permission_service.permissions_for(item, self.identity, now)

    def view(self, now: Optional[datetime] = None) -> ForumView:
        """Render the forum for the current user."""
        return render_forum(
            self.forest,
            self.identity,
            self.permission_service,
            now=now,
            replying_to=self.replying_to,
            loading=self.loading,
        )

    # Notifications

    def dismiss(self, index: int) -> None:
        del self.notifications[index]

    def drain_notifications(self) -> list[Notification]:
        """Return and clear all queued notifications."""
        drained, self.notifications = self.notifications, []
        return drained

    @contextmanager
    def _track(self, key: str) -> Iterator[None]:
        self._pending[key] += 1
        try:
            yield
        finally:
            self._pending[key] -= 1
            if not self._pending[key]:
                del self._pending[key]

    def _notify(self, variant: NotificationVariant, title: str, description: str) -> None:
        self.notifications.append(
            Notification(variant=variant, title=title, description=description)
        )

    def _notify_notice(self, error: ValidationError) -> None:
        self._notify(NotificationVariant.NOTICE, "Nothing to post", str(error))

    def _notify_failure(self, title: str, error: AdapterError, fallback: str) -> None:
        """Queue a failure, preferring the backend's own reason."""
        description = fallback
        if isinstance(error, BackendError) and error.message:
            description = error.message
        self._notify(NotificationVariant.DESTRUCTIVE, title, description)


class ForumStoreFactory:
    """Builds a ForumStore per discussion from shared services."""

    def __init__(
        self,
        load_forum_use_case: LoadForumUseCase,
        create_item_use_case: CreateItemUseCase,
        update_item_use_case: UpdateItemUseCase,
        delete_item_use_case: DeleteItemUseCase,
        identity_service: IdentityService,
        permission_service: PermissionService,
    ) -> None:
        self.load_forum_use_case = load_forum_use_case
        self.create_item_use_case = create_item_use_case
        self.update_item_use_case = update_item_use_case
        self.delete_item_use_case = delete_item_use_case
        self.identity_service = identity_service
        self.permission_service = permission_service

    def create(self, context_id: str) -> ForumStore:
        """Create an empty store for a discussion; call ``load()`` next."""
        return ForumStore(
            context_id=ContextId(context_id),
            load_forum_use_case=self.load_forum_use_case,
            create_item_use_case=self.create_item_use_case,
            update_item_use_case=self.update_item_use_case,
            delete_item_use_case=self.delete_item_use_case,
            identity_service=self.identity_service,
            permission_service=self.permission_service,
        )
