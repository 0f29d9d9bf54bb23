"""Forum view rendering.

Flattens the forest into rows in render order, attaching what each row
needs: indentation depth, author badge, attachment link and which actions
the current user is offered.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

import nh3
from pydantic import BaseModel

from forum.domain.model.qa_item import Attachment, Forest
from forum.domain.service import PermissionService, tree
from forum.domain.value import Identity, Permissions, QAItemId

LOADING_MESSAGE = "Loading Q&A..."
EMPTY_MESSAGE = "No questions yet."


class ForumStatus(str, Enum):
    LOADING = "loading"
    EMPTY = "empty"
    READY = "ready"


class ItemView(BaseModel):
    """One rendered question or reply."""

    item_id: QAItemId
    parent_id: Optional[QAItemId]
    depth: int
    author_display_name: str
    author_initial: str
    is_organizer: bool
    created_at: datetime
    body_html: str
    attachment: Optional[Attachment]
    permissions: Permissions
    reply_form_open: bool


class ForumView(BaseModel):
    """The whole forum as the user sees it."""

    status: ForumStatus
    message: Optional[str] = None
    items: list[ItemView] = []


def render_forum(
    forest: Forest,
    identity: Identity,
    permission_service: PermissionService,
    now: Optional[datetime] = None,
    replying_to: Optional[QAItemId] = None,
    loading: bool = False,
) -> ForumView:
    """Render the forest for the current user.

    Every depth renders the same way; nothing is collapsed. Item bodies come
    from other users, so their HTML is sanitized here: scripts, event
    handler attributes and unsafe URL schemes are dropped.
    """
    if loading:
        return ForumView(status=ForumStatus.LOADING, message=LOADING_MESSAGE)
    if not forest:
        return ForumView(status=ForumStatus.EMPTY, message=EMPTY_MESSAGE)

    now = now or permission_service.clock()
    rows = [
        ItemView(
            item_id=item.id,
            parent_id=item.parent_id,
            depth=depth,
            author_display_name=item.author_display_name,
            author_initial=item.author_display_name[:1],
            is_organizer=item.is_organizer,
            created_at=item.created_at,
            body_html=nh3.clean(item.body_html),
            attachment=item.attachment,
            permissions=permission_service.permissions_for(item, identity, now),
            reply_form_open=item.id == replying_to,
        )
        for depth, item in tree.walk(forest)
    ]
    return ForumView(status=ForumStatus.READY, items=rows)
