"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone

import jwt
import logfire

from forum.domain.model.qa_item import Attachment, QAItem
from forum.domain.value import AttachmentKind, QAItemId, UserId

T0 = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)
SIGNING_KEY = "test-signing-key-that-is-long-enough-for-hs256"

# Local only, no console output; spans and events still run
logfire.configure(send_to_logfire=False, console=False)


def make_item(
    item_id: str,
    parent_id: str | None = None,
    author_id: str = "author-1",
    created_at: datetime = T0,
    text: str | None = None,
    replies: tuple[QAItem, ...] = (),
    attachment: Attachment | None = None,
) -> QAItem:
    """Build a QA item with sensible defaults."""
    return QAItem(
        id=QAItemId(item_id),
        parent_id=QAItemId(parent_id) if parent_id else None,
        author_id=UserId(author_id),
        author_display_name=f"Author {author_id}",
        created_at=created_at,
        body_html=text if text is not None else f"<p>{item_id}</p>",
        attachment=attachment,
        replies=replies,
    )


def make_attachment(name: str = "deck.pdf") -> Attachment:
    return Attachment(
        name=name,
        url=f"https://files.example.com/{name}",
        kind=AttachmentKind.PDF,
    )


def make_token(user_id: str | None = "author-1", roles: list[str] | None = None) -> str:
    """Encode a bearer token the way the auth server does."""
    payload: dict = {"role": roles or []}
    if user_id is not None:
        payload["user_id"] = user_id
    return jwt.encode(payload, SIGNING_KEY, algorithm="HS256")


class FakeClock:
    """Controllable clock for permission windows."""

    def __init__(self, now: datetime = T0) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now = self.now + timedelta(**kwargs)
