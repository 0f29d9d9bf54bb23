"""Unit tests for the in-memory Q&A repository."""

import pytest

from forum.adapter.error import AuthorizationError, BackendError, ItemNotFoundError
from forum.config import PermissionSettings
from forum.domain.model.draft import AttachmentChange
from forum.domain.value import AttachmentFile, AttachmentKind, ContextId, QAItemId
from forum.persistence.repository.inmemory import (
    InMemoryQARepository,
    InMemoryTokenRepository,
)
from tests.conftest import FakeClock, make_token

CTX = ContextId("collab-1")


def make_repo(
    token: str | None = None, clock: FakeClock | None = None
) -> tuple[InMemoryQARepository, InMemoryTokenRepository, FakeClock]:
    clock = clock or FakeClock()
    tokens = InMemoryTokenRepository(token if token is not None else make_token("author-1"))
    repo = InMemoryQARepository(
        token_repository=tokens,
        permission_settings=PermissionSettings(),
        organizer_ids={"organizer-1"},
        display_names={"author-1": "Asha"},
        clock=clock,
    )
    return repo, tokens, clock


class TestCreate:
    """Tests for create."""

    @pytest.mark.asyncio
    async def test_create_assigns_author_from_token(self):
        repo, _, clock = make_repo()

        item = await repo.create(CTX, "<p>hi</p>")

        assert item.id
        assert item.author_id == "author-1"
        assert item.author_display_name == "Asha"
        assert item.is_organizer is False
        assert item.created_at == clock.now
        assert item.is_question

    @pytest.mark.asyncio
    async def test_organizer_flag(self):
        repo, _, _ = make_repo(make_token("organizer-1"))

        item = await repo.create(CTX, "<p>welcome</p>")

        assert item.is_organizer is True
        assert item.author_display_name == "organizer-1"

    @pytest.mark.asyncio
    async def test_requires_token(self):
        repo, tokens, _ = make_repo()
        await tokens.clear()

        with pytest.raises(AuthorizationError) as exc_info:
            await repo.create(CTX, "<p>hi</p>")

        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_rejects_empty_submission(self):
        repo, _, _ = make_repo()

        with pytest.raises(BackendError) as exc_info:
            await repo.create(CTX, "   ")

        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_unknown_parent(self):
        repo, _, _ = make_repo()

        with pytest.raises(ItemNotFoundError):
            await repo.create(CTX, "<p>re</p>", parent_id=QAItemId("nope"))

    @pytest.mark.asyncio
    async def test_parent_from_other_discussion(self):
        repo, _, _ = make_repo()
        question = await repo.create(ContextId("collab-2"), "<p>elsewhere</p>")

        with pytest.raises(ItemNotFoundError):
            await repo.create(CTX, "<p>re</p>", parent_id=question.id)

    @pytest.mark.asyncio
    async def test_attachment_only_post(self):
        repo, _, _ = make_repo()
        file = AttachmentFile(name="photo.png", content=b"PNG", content_type="image/png")

        item = await repo.create(CTX, "", attachment=file)

        assert item.attachment is not None
        assert item.attachment.name == "photo.png"
        assert item.attachment.kind == AttachmentKind.IMAGE
        assert item.attachment.url.endswith(f"/{item.id}/photo.png")


class TestFindByContext:
    """Tests for find_by_context."""

    @pytest.mark.asyncio
    async def test_builds_nested_tree(self):
        repo, _, clock = make_repo()
        q1 = await repo.create(CTX, "<p>q1</p>")
        clock.advance(seconds=1)
        r1 = await repo.create(CTX, "<p>r1</p>", parent_id=q1.id)
        clock.advance(seconds=1)
        r2 = await repo.create(CTX, "<p>r2</p>", parent_id=r1.id)
        clock.advance(seconds=1)
        r3 = await repo.create(CTX, "<p>r3</p>", parent_id=q1.id)
        clock.advance(seconds=1)
        q2 = await repo.create(CTX, "<p>q2</p>")

        forest = await repo.find_by_context(CTX)

        assert [q.id for q in forest] == [q2.id, q1.id]
        assert [r.id for r in forest[1].replies] == [r1.id, r3.id]
        assert forest[1].replies[0].replies[0].id == r2.id

    @pytest.mark.asyncio
    async def test_discussions_are_separate(self):
        repo, _, _ = make_repo()
        await repo.create(ContextId("collab-2"), "<p>elsewhere</p>")

        assert await repo.find_by_context(CTX) == []


class TestUpdate:
    """Tests for update."""

    @pytest.mark.asyncio
    async def test_update_text_and_remove_attachment(self):
        repo, _, _ = make_repo()
        file = AttachmentFile(name="deck.pdf", content=b"%PDF", content_type="application/pdf")
        item = await repo.create(CTX, "<p>old</p>", attachment=file)

        updated = await repo.update(item.id, CTX, "<p>new</p>", AttachmentChange.remove())

        assert updated.body_html == "<p>new</p>"
        assert updated.attachment is None
        assert updated.replies == ()

    @pytest.mark.asyncio
    async def test_unchanged_keeps_attachment(self):
        repo, _, _ = make_repo()
        file = AttachmentFile(name="notes.docx", content=b"DOC", content_type="application/octet-stream")
        item = await repo.create(CTX, "<p>old</p>", attachment=file)

        updated = await repo.update(item.id, CTX, "<p>new</p>", AttachmentChange.unchanged())

        assert updated.attachment == item.attachment
        assert updated.attachment.kind == AttachmentKind.DOC

    @pytest.mark.asyncio
    async def test_edit_window_enforced(self):
        repo, _, clock = make_repo()
        item = await repo.create(CTX, "<p>old</p>")
        clock.advance(minutes=5, seconds=1)

        with pytest.raises(AuthorizationError) as exc_info:
            await repo.update(item.id, CTX, "<p>late</p>", AttachmentChange.unchanged())

        assert exc_info.value.status_code == 403

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self):
        repo, tokens, _ = make_repo()
        item = await repo.create(CTX, "<p>mine</p>")
        await tokens.set(make_token("intruder"))

        with pytest.raises(AuthorizationError):
            await repo.update(item.id, CTX, "<p>yours</p>", AttachmentChange.unchanged())

    @pytest.mark.asyncio
    async def test_admin_can_edit_any_time(self):
        repo, tokens, clock = make_repo()
        item = await repo.create(CTX, "<p>old</p>")
        clock.advance(days=2)
        await tokens.set(make_token("admin-9", ["admin"]))

        updated = await repo.update(item.id, CTX, "<p>moderated</p>", AttachmentChange.unchanged())

        assert updated.body_html == "<p>moderated</p>"
        assert updated.author_id == "author-1"


class TestDelete:
    """Tests for delete."""

    @pytest.mark.asyncio
    async def test_delete_removes_descendants(self):
        repo, _, _ = make_repo()
        q1 = await repo.create(CTX, "<p>q1</p>")
        r1 = await repo.create(CTX, "<p>r1</p>", parent_id=q1.id)
        await repo.create(CTX, "<p>r2</p>", parent_id=r1.id)

        await repo.delete(r1.id)

        forest = await repo.find_by_context(CTX)
        assert len(forest) == 1
        assert forest[0].replies == ()

    @pytest.mark.asyncio
    async def test_delete_window_enforced(self):
        repo, _, clock = make_repo()
        item = await repo.create(CTX, "<p>q1</p>")
        clock.advance(minutes=30)

        with pytest.raises(AuthorizationError):
            await repo.delete(item.id)

    @pytest.mark.asyncio
    async def test_delete_unknown_item(self):
        repo, _, _ = make_repo()

        with pytest.raises(ItemNotFoundError):
            await repo.delete(QAItemId("nope"))
