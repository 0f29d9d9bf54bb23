"""Permission domain service.

Authors may edit an item for a short window after posting and delete it for a
longer one. Admins may always do both. These checks only decide what the
client offers; the backend repeats them on every edit and delete.
"""

from collections.abc import Callable, Iterable
from datetime import datetime, timedelta, timezone

import logfire

from forum.config import PermissionSettings
from forum.domain.model.qa_item import QAItem
from forum.domain.value import Identity, Permissions, UserId

from .base import Service

DEFAULT_EDIT_WINDOW = timedelta(minutes=5)
DEFAULT_DELETE_WINDOW = timedelta(minutes=30)
ADMIN_ROLE = "admin"


def compute_permissions(
    item: QAItem,
    user_id: UserId | None,
    roles: Iterable[str],
    now: datetime,
    edit_window: timedelta = DEFAULT_EDIT_WINDOW,
    delete_window: timedelta = DEFAULT_DELETE_WINDOW,
    admin_role: str = ADMIN_ROLE,
) -> Permissions:
    """Compute what a user may do with an item at a given time.

    Windows are exclusive: at exactly five minutes an author can no longer
    edit.

    Args:
        item: Item being checked
        user_id: Current user, None when unauthenticated
        roles: Current user's roles
        now: Time of the check (timezone-aware)
        edit_window: How long an author may edit
        delete_window: How long an author may delete
        admin_role: Role that bypasses authorship and windows

    Returns:
        Permissions for the item
    """
    is_author = user_id is not None and user_id == item.author_id
    is_admin = admin_role in set(roles)
    elapsed = now - item.created_at

    return Permissions(
        can_edit=is_admin or (is_author and elapsed < edit_window),
        can_delete=is_admin or (is_author and elapsed < delete_window),
        is_author=is_author,
        is_admin=is_admin,
    )


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class PermissionService(Service):
    """Domain service applying the configured permission windows."""

    def __init__(
        self,
        permission_settings: PermissionSettings,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize permission service.

        Args:
            permission_settings: Edit/delete windows and admin role
            clock: Source of the current time
        """
        self.edit_window = timedelta(minutes=permission_settings.edit_window_minutes)
        self.delete_window = timedelta(minutes=permission_settings.delete_window_minutes)
        self.admin_role = permission_settings.admin_role
        self.clock = clock

    def permissions_for(
        self, item: QAItem, identity: Identity, now: datetime | None = None
    ) -> Permissions:
        """Compute permissions for one item.

        Args:
            item: Item being checked
            identity: Current user
            now: Time of the check, defaults to the service clock

        Returns:
            Permissions for the item
        """
        return compute_permissions(
            item,
            identity.user_id,
            identity.roles,
            now or self.clock(),
            edit_window=self.edit_window,
            delete_window=self.delete_window,
            admin_role=self.admin_role,
        )

    def can_edit(self, item: QAItem, identity: Identity, now: datetime | None = None) -> bool:
        allowed = self.permissions_for(item, identity, now).can_edit
        if not allowed:
            logfire.debug(
                "Edit not permitted",
                item_id=item.id,
                user_id=identity.user_id,
            )
        return allowed

    def can_delete(
        self, item: QAItem, identity: Identity, now: datetime | None = None
    ) -> bool:
        allowed = self.permissions_for(item, identity, now).can_delete
        if not allowed:
            logfire.debug(
                "Delete not permitted",
                item_id=item.id,
                user_id=identity.user_id,
            )
        return allowed
