"""SQLAlchemy implementation of CategoryRepository."""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import Category, TransactionType
from src.domain.interfaces import CategoryRepository
from src.infrastructure.database.models import CategoryModel


class SqlCategoryRepository(CategoryRepository):
    """SQL-backed category repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def list(self, type: Optional[TransactionType] = None) -> List[Category]:
        stmt = select(CategoryModel).order_by(CategoryModel.type, CategoryModel.name)
        if type is not None:
            stmt = stmt.where(CategoryModel.type == type.value)

        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    async def get(self, category_id: int) -> Optional[Category]:
        model = await self._session.get(CategoryModel, category_id)
        return self._to_entity(model) if model else None

    async def add(self, category: Category) -> Category:
        model = CategoryModel(name=category.name, type=category.type.value)
        self._session.add(model)
        await self._session.flush()

        category.id = model.id
        return category

    async def delete(self, category_id: int) -> bool:
        result = await self._session.execute(
            delete(CategoryModel).where(CategoryModel.id == category_id)
        )
        return result.rowcount > 0

    def _to_entity(self, model: CategoryModel) -> Category:
        return Category(
            id=model.id,
            name=model.name,
            type=TransactionType(model.type),
        )
