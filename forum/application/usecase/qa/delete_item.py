"""Delete item use case."""

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.repository import QARepository
from forum.domain.value import QAItemId


class DeleteItemRequest(BaseModel):
    """Delete item request."""

    item_id: str


class DeleteItemResponse(BaseModel):
    """Delete item response."""

    item_id: str


class DeleteItemUseCase(BaseUseCase):
    """Use case for deleting an item together with its replies."""

    def __init__(self, qa_repository: QARepository) -> None:
        self.qa_repository = qa_repository

    async def execute(self, request: DeleteItemRequest) -> DeleteItemResponse:
        """Execute delete item flow.

        Raises:
            AuthorizationError: If the backend refuses the deletion
            AdapterError: If the backend request fails
        """
        with logfire.span("delete_item", item_id=request.item_id):
            await self.qa_repository.delete(QAItemId(request.item_id))
            logfire.info("Item deleted", item_id=request.item_id)
            return DeleteItemResponse(item_id=request.item_id)
