"""Q&A use cases."""

from .create_item import CreateItemRequest, CreateItemResponse, CreateItemUseCase
from .delete_item import DeleteItemRequest, DeleteItemResponse, DeleteItemUseCase
from .load_forum import LoadForumRequest, LoadForumResponse, LoadForumUseCase
from .update_item import UpdateItemRequest, UpdateItemResponse, UpdateItemUseCase

__all__ = [
    "CreateItemRequest",
    "CreateItemResponse",
    "CreateItemUseCase",
    "DeleteItemRequest",
    "DeleteItemResponse",
    "DeleteItemUseCase",
    "LoadForumRequest",
    "LoadForumResponse",
    "LoadForumUseCase",
    "UpdateItemRequest",
    "UpdateItemResponse",
    "UpdateItemUseCase",
]
