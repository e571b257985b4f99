"""Category service - handles category use cases."""

from typing import List, Optional

import structlog

from src.domain.entities import Category, TransactionType
from src.domain.exceptions import CategoryNotFoundException, InvalidRequestException
from src.domain.interfaces import CategoryRepository, UnitOfWork

logger = structlog.get_logger(__name__)


class CategoryService:
    """Application service for income/expense categories."""

    def __init__(self, category_repository: CategoryRepository, unit_of_work: UnitOfWork):
        self._category_repo = category_repository
        self._uow = unit_of_work

    async def list_categories(self, type: Optional[TransactionType] = None) -> List[Category]:
        return await self._category_repo.list(type=type)

    async def get_category(self, category_id: int) -> Category:
        category = await self._category_repo.get(category_id)

        if category is None:
            raise CategoryNotFoundException(category_id)

        return category

    async def create_category(self, name: str, type: TransactionType) -> Category:
        if not name or not name.strip():
            raise InvalidRequestException("name is required")

        async with self._uow.transaction("create category"):
            category = await self._category_repo.add(Category(name=name.strip(), type=type))

        logger.info("category_created", category_id=category.id, type=type.value)
        return category

    async def delete_category(self, category_id: int) -> None:
        """
        Delete a category.

        Raises:
            CategoryNotFoundException: If category not found
            TransactionalFailureException: If transactions still use it
        """
        async with self._uow.transaction("delete category"):
            if not await self._category_repo.delete(category_id):
                raise CategoryNotFoundException(category_id)

        logger.info("category_deleted", category_id=category_id)
