"""Test environment fixtures backed by the DI container."""

import pytest_asyncio

from forum.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Create a fixture yielding a request-scoped container.

    Each test gets a fresh container, so APP-scoped in-memory repositories
    start empty.

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_load(unit_env):
            factory = await unit_env.get(ForumStoreFactory)
            store = factory.create("collab-1")
            await store.load()
    """

    @pytest_asyncio.fixture
    async def _env():
        container = build_test_container(unmock=unmock)
        try:
            async with container() as request_container:
                yield request_container
        finally:
            await container.close()

    return _env
