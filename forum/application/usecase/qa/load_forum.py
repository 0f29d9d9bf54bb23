"""Load forum use case."""

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.model.qa_item import QAItem
from forum.domain.repository import QARepository
from forum.domain.service import tree
from forum.domain.value import ContextId


class LoadForumRequest(BaseModel):
    """Load forum request."""

    context_id: str


class LoadForumResponse(BaseModel):
    """Load forum response."""

    context_id: str
    items: list[QAItem]
    total: int  # Questions and replies at every depth


class LoadForumUseCase(BaseUseCase):
    """Use case for fetching the full question/reply tree of a discussion."""

    def __init__(self, qa_repository: QARepository) -> None:
        """Initialize load forum use case.

        Args:
            qa_repository: Q&A repository
        """
        self.qa_repository = qa_repository

    async def execute(self, request: LoadForumRequest) -> LoadForumResponse:
        """Execute load forum flow.

        Safe to call repeatedly; an empty discussion yields no items.

        Args:
            request: Load request with the discussion ID

        Returns:
            Top-level questions with nested replies

        Raises:
            NetworkError: If the backend is unreachable
        """
        with logfire.span("load_forum", context_id=request.context_id):
            items = await self.qa_repository.find_by_context(ContextId(request.context_id))
            total = tree.count_nodes(tuple(items))
            logfire.info(
                "Forum loaded",
                context_id=request.context_id,
                questions=len(items),
                total=total,
            )
            return LoadForumResponse(
                context_id=request.context_id,
                items=items,
                total=total,
            )
