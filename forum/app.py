"""Forum client bootstrap.

Usage:
    async with open_forum("collab-42") as store:
        await store.post_question("<p>How do I apply?</p>")
        for row in store.view().items:
            ...
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from forum.application.store import ForumStore, ForumStoreFactory
from forum.config import Settings
from forum.util.di.container import create_container
from forum.util.logging import setup_logging
from forum.util.observability import configure_logfire, instrument_httpx


def configure(settings: Settings | None = None) -> Settings:
    """Set up logging and observability once per process.

    Logfire must be configured before httpx is instrumented.
    """
    settings = settings or Settings()
    setup_logging(settings)
    configure_logfire(settings)
    instrument_httpx()
    return settings


@asynccontextmanager
async def open_forum(context_id: str) -> AsyncIterator[ForumStore]:
    """Open a loaded forum store for a discussion.

    Args:
        context_id: Discussion (collaboration) ID

    Yields:
        ForumStore with the tree already loaded
    """
    container = create_container()
    try:
        async with container() as request_container:
            factory = await request_container.get(ForumStoreFactory)
            store = factory.create(context_id)
            await store.load()
            yield store
    finally:
        await container.close()
