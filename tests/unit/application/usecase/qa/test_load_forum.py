"""Unit tests for LoadForumUseCase."""

import pytest

from forum.application.usecase.qa import LoadForumRequest, LoadForumUseCase
from forum.domain.repository import QARepository, TokenRepository
from forum.domain.value import ContextId
from tests.conftest import make_token
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestLoadForumUseCase:
    """Tests for LoadForumUseCase."""

    @pytest.mark.asyncio
    async def test_empty_discussion(self, unit_env):
        use_case = await unit_env.get(LoadForumUseCase)

        response = await use_case.execute(LoadForumRequest(context_id="collab-1"))

        assert response.context_id == "collab-1"
        assert response.items == []
        assert response.total == 0

    @pytest.mark.asyncio
    async def test_counts_items_at_every_depth(self, unit_env):
        tokens = await unit_env.get(TokenRepository)
        await tokens.set(make_token("author-1"))
        repo = await unit_env.get(QARepository)
        question = await repo.create(ContextId("collab-1"), "<p>q</p>")
        reply = await repo.create(ContextId("collab-1"), "<p>r</p>", parent_id=question.id)
        await repo.create(ContextId("collab-1"), "<p>rr</p>", parent_id=reply.id)
        use_case = await unit_env.get(LoadForumUseCase)

        response = await use_case.execute(LoadForumRequest(context_id="collab-1"))

        assert len(response.items) == 1
        assert response.total == 3

    @pytest.mark.asyncio
    async def test_repeated_loads_agree(self, unit_env):
        """Loading twice yields the same tree."""
        tokens = await unit_env.get(TokenRepository)
        await tokens.set(make_token("author-1"))
        repo = await unit_env.get(QARepository)
        await repo.create(ContextId("collab-1"), "<p>q</p>")
        use_case = await unit_env.get(LoadForumUseCase)

        first = await use_case.execute(LoadForumRequest(context_id="collab-1"))
        second = await use_case.execute(LoadForumRequest(context_id="collab-1"))

        assert first.items == second.items
