"""Pure operations on a forest of Q&A items.

None of these functions mutate their input. Each returns a new forest built
from the old one, sharing untouched subtrees. Lookups are depth-first and
match on item id.

Ordering is asymmetric: new questions go to the front of the forest (the
feed shows recent questions first) while new replies go to the end of their
parent's replies (threads read chronologically).
"""

from collections.abc import Iterator
from typing import Optional

from forum.domain.model.qa_item import Forest, QAItem
from forum.domain.value import QAItemId


def insert_question(forest: Forest, new_item: QAItem) -> Forest:
    """Prepend a new top-level question."""
    return (new_item, *forest)


def insert_reply(forest: Forest, parent_id: QAItemId, new_item: QAItem) -> Forest:
    """Append ``new_item`` to the replies of the item matching ``parent_id``.

    If no item matches, the forest comes back unchanged.
    """
    return tuple(_insert_reply(item, parent_id, new_item) for item in forest)


def _insert_reply(item: QAItem, parent_id: QAItemId, new_item: QAItem) -> QAItem:
    if item.id == parent_id:
        return item.model_copy(update={"replies": (*item.replies, new_item)})
    if item.replies:
        return item.model_copy(
            update={"replies": insert_reply(item.replies, parent_id, new_item)}
        )
    return item


def update_node(forest: Forest, updated_item: QAItem) -> Forest:
    """Replace the item with ``updated_item.id`` wherever it sits.

    The backend's update response carries no replies, so the replacement
    keeps the replies already in the forest.
    """
    return tuple(_update_node(item, updated_item) for item in forest)


def _update_node(item: QAItem, updated_item: QAItem) -> QAItem:
    if item.id == updated_item.id:
        return updated_item.model_copy(update={"replies": item.replies})
    if item.replies:
        return item.model_copy(update={"replies": update_node(item.replies, updated_item)})
    return item


def delete_node(forest: Forest, target_id: QAItemId) -> Forest:
    """Remove the item with ``target_id`` and its whole subtree."""
    return tuple(
        item.model_copy(update={"replies": delete_node(item.replies, target_id)})
        if item.replies
        else item
        for item in forest
        if item.id != target_id
    )


def walk(forest: Forest, depth: int = 0) -> Iterator[tuple[int, QAItem]]:
    """Yield ``(depth, item)`` pairs in render order (pre-order)."""
    for item in forest:
        yield depth, item
        yield from walk(item.replies, depth + 1)


def find_node(forest: Forest, item_id: QAItemId) -> Optional[QAItem]:
    """Find an item at any depth."""
    for _, item in walk(forest):
        if item.id == item_id:
            return item
    return None


def contains(forest: Forest, item_id: QAItemId) -> bool:
    return find_node(forest, item_id) is not None


def count_nodes(forest: Forest) -> int:
    return sum(1 for _ in walk(forest))
