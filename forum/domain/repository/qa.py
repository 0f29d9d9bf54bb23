"""Q&A repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.draft import AttachmentChange
from forum.domain.model.qa_item import QAItem
from forum.domain.value import AttachmentFile, ContextId, QAItemId


class QARepository(ABC):
    """Repository for Q&A items of a discussion context.

    The backend owns the data: it assigns ids, timestamps and author fields,
    and enforces edit/delete permissions.
    """

    @abstractmethod
    async def find_by_context(self, context_id: ContextId) -> List[QAItem]:
        """Fetch the full nested tree of a discussion.

        Args:
            context_id: Discussion (collaboration) ID

        Returns:
            Top-level questions with replies populated recursively
        """
        pass

    @abstractmethod
    async def create(
        self,
        context_id: ContextId,
        text: str,
        parent_id: Optional[QAItemId] = None,
        attachment: Optional[AttachmentFile] = None,
    ) -> QAItem:
        """Create a question, or a reply when ``parent_id`` is given.

        Returns:
            The created item with no replies
        """
        pass

    @abstractmethod
    async def update(
        self,
        item_id: QAItemId,
        context_id: ContextId,
        text: str,
        change: AttachmentChange,
    ) -> QAItem:
        """Update an item's text and attachment.

        Returns:
            The updated item. Replies are not included.
        """
        pass

    @abstractmethod
    async def delete(self, item_id: QAItemId) -> None:
        """Delete an item and its replies."""
        pass
