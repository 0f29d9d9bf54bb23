"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.store import ForumStoreFactory
from forum.application.usecase.qa import (
    CreateItemUseCase,
    DeleteItemUseCase,
    LoadForumUseCase,
    UpdateItemUseCase,
)
from forum.domain.repository import QARepository
from forum.domain.service import IdentityService, PermissionService
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_load_forum_use_case(self, qa_repository: QARepository) -> LoadForumUseCase:
        """Provide load forum use case."""
        return LoadForumUseCase(qa_repository=qa_repository)

    @provide(scope=Scope.REQUEST)
    def get_create_item_use_case(self, qa_repository: QARepository) -> CreateItemUseCase:
        """Provide create item use case."""
        return CreateItemUseCase(qa_repository=qa_repository)

    @provide(scope=Scope.REQUEST)
    def get_update_item_use_case(self, qa_repository: QARepository) -> UpdateItemUseCase:
        """Provide update item use case."""
        return UpdateItemUseCase(qa_repository=qa_repository)

    @provide(scope=Scope.REQUEST)
    def get_delete_item_use_case(self, qa_repository: QARepository) -> DeleteItemUseCase:
        """Provide delete item use case."""
        return DeleteItemUseCase(qa_repository=qa_repository)

    @provide(scope=Scope.REQUEST)
    def get_forum_store_factory(
        self,
        load_forum_use_case: LoadForumUseCase,
        create_item_use_case: CreateItemUseCase,
        update_item_use_case: UpdateItemUseCase,
        delete_item_use_case: DeleteItemUseCase,
        identity_service: IdentityService,
        permission_service: PermissionService,
    ) -> ForumStoreFactory:
        """Provide forum store factory."""
        return ForumStoreFactory(
            load_forum_use_case=load_forum_use_case,
            create_item_use_case=create_item_use_case,
            update_item_use_case=update_item_use_case,
            delete_item_use_case=delete_item_use_case,
            identity_service=identity_service,
            permission_service=permission_service,
        )
