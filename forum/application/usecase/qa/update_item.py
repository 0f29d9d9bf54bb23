"""Update item use case."""

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.error import EmptySubmissionError
from forum.domain.model.draft import AttachmentDraft, ChangeKind
from forum.domain.model.qa_item import QAItem
from forum.domain.repository import QARepository
from forum.domain.value import ContextId, QAItemId


class UpdateItemRequest(BaseModel):
    """Update item request."""

    item_id: str
    context_id: str
    text: str
    draft: AttachmentDraft = AttachmentDraft()


class UpdateItemResponse(BaseModel):
    """Update item response.

    The item carries no replies; callers keep the ones they already have.
    """

    item: QAItem


class UpdateItemUseCase(BaseUseCase):
    """Use case for editing an item's text and attachment."""

    def __init__(self, qa_repository: QARepository) -> None:
        """Initialize update item use case.

        Args:
            qa_repository: Q&A repository
        """
        self.qa_repository = qa_repository

    async def execute(self, request: UpdateItemRequest) -> UpdateItemResponse:
        """Execute update item flow.

        Args:
            request: Update request with new text and the attachment draft

        Returns:
            The updated item as confirmed by the backend

        Raises:
            EmptySubmissionError: If the edit would leave neither text nor attachment
            AdapterError: If the backend request fails
        """
        change = request.draft.change()
        keeps_attachment = change.kind == ChangeKind.REPLACE or (
            change.kind == ChangeKind.UNCHANGED and request.draft.existing is not None
        )
        if not request.text.strip() and not keeps_attachment:
            raise EmptySubmissionError()

        with logfire.span(
            "update_item",
            item_id=request.item_id,
            context_id=request.context_id,
            attachment_change=change.kind.value,
        ):
            item = await self.qa_repository.update(
                item_id=QAItemId(request.item_id),
                context_id=ContextId(request.context_id),
                text=request.text,
                change=change,
            )
            logfire.info("Item updated", item_id=item.id)
            return UpdateItemResponse(item=item)
