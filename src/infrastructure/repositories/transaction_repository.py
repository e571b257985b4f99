"""SQLAlchemy implementation of TransactionRepository."""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import Transaction, TransactionType
from src.domain.interfaces import TransactionRepository
from src.infrastructure.database.models import TransactionModel


class SqlTransactionRepository(TransactionRepository):
    """SQL-backed transaction repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def list(
        self,
        week_id: Optional[int] = None,
        type: Optional[TransactionType] = None,
    ) -> List[Transaction]:
        stmt = select(TransactionModel).order_by(
            TransactionModel.date.desc(),
            TransactionModel.id.desc(),
        )
        if week_id is not None:
            stmt = stmt.where(TransactionModel.week_id == week_id)
        if type is not None:
            stmt = stmt.where(TransactionModel.type == type.value)

        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    async def get(self, transaction_id: int) -> Optional[Transaction]:
        model = await self._session.get(TransactionModel, transaction_id)
        return self._to_entity(model) if model else None

    async def add(self, transaction: Transaction) -> Transaction:
        model = TransactionModel(
            date=transaction.date,
            description=transaction.description,
            type=transaction.type.value,
            category_id=transaction.category_id,
            amount=transaction.amount,
            week_id=transaction.week_id,
            created_at=transaction.created_at,
        )
        self._session.add(model)
        await self._session.flush()

        transaction.id = model.id
        return transaction

    async def delete(self, transaction_id: int) -> bool:
        result = await self._session.execute(
            delete(TransactionModel).where(TransactionModel.id == transaction_id)
        )
        return result.rowcount > 0

    def _to_entity(self, model: TransactionModel) -> Transaction:
        return Transaction(
            id=model.id,
            date=model.date,
            description=model.description,
            type=TransactionType(model.type),
            category_id=model.category_id,
            amount=model.amount,
            week_id=model.week_id,
            created_at=model.created_at,
        )
