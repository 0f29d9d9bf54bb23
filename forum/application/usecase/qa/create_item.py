"""Create item use case."""

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.error import EmptySubmissionError
from forum.domain.model.qa_item import QAItem
from forum.domain.repository import QARepository
from forum.domain.value import AttachmentFile, ContextId, QAItemId


class CreateItemRequest(BaseModel):
    """Create item request."""

    context_id: str
    text: str
    parent_id: str | None = None  # Parent item ID for replies
    attachment: AttachmentFile | None = None


class CreateItemResponse(BaseModel):
    """Create item response."""

    item: QAItem


class CreateItemUseCase(BaseUseCase):
    """Use case for posting a question or replying to an item."""

    def __init__(self, qa_repository: QARepository) -> None:
        """Initialize create item use case.

        Args:
            qa_repository: Q&A repository
        """
        self.qa_repository = qa_repository

    async def execute(self, request: CreateItemRequest) -> CreateItemResponse:
        """Execute create item flow.

        Steps:
        1. Reject empty submissions before any network call
        2. Create the item via the backend, which assigns id and author

        Args:
            request: Create request with text and optional parent/attachment

        Returns:
            The created item as confirmed by the backend

        Raises:
            EmptySubmissionError: If there is neither text nor attachment
            AdapterError: If the backend request fails
        """
        if not request.text.strip() and request.attachment is None:
            raise EmptySubmissionError()

        with logfire.span(
            "create_item",
            context_id=request.context_id,
            parent_id=request.parent_id,
            attachment_size=request.attachment.size if request.attachment else None,
        ):
            item = await self.qa_repository.create(
                context_id=ContextId(request.context_id),
                text=request.text,
                parent_id=QAItemId(request.parent_id) if request.parent_id else None,
                attachment=request.attachment,
            )
            logfire.info(
                "Item created",
                item_id=item.id,
                parent_id=item.parent_id,
                context_id=request.context_id,
            )
            return CreateItemResponse(item=item)
