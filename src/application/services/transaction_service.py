"""Transaction service - handles income/expense ledger use cases."""

from datetime import date
from typing import List, Optional

import structlog

from src.domain.entities import Transaction, TransactionType
from src.domain.exceptions import InvalidRequestException, TransactionNotFoundException
from src.domain.interfaces import TransactionRepository, UnitOfWork

logger = structlog.get_logger(__name__)


class TransactionService:
    """
    Application service for ledger transactions.

    Transactions are created and deleted independently; deleting one
    never touches its week or category.
    """

    def __init__(self, transaction_repository: TransactionRepository, unit_of_work: UnitOfWork):
        self._transaction_repo = transaction_repository
        self._uow = unit_of_work

    async def list_transactions(
        self,
        week_id: Optional[int] = None,
        type: Optional[TransactionType] = None,
    ) -> List[Transaction]:
        """List transactions, newest first."""
        return await self._transaction_repo.list(week_id=week_id, type=type)

    async def get_transaction(self, transaction_id: int) -> Transaction:
        transaction = await self._transaction_repo.get(transaction_id)

        if transaction is None:
            raise TransactionNotFoundException(transaction_id)

        return transaction

    async def create_transaction(
        self,
        date: date,
        description: str,
        type: TransactionType,
        category_id: int,
        amount: float,
        week_id: int,
    ) -> Transaction:
        """
        Record an income or expense.

        Raises:
            InvalidRequestException: If the amount is not positive
            TransactionalFailureException: If the category or week does not exist
        """
        if amount <= 0:
            raise InvalidRequestException("amount must be positive")

        async with self._uow.transaction("create transaction"):
            transaction = await self._transaction_repo.add(
                Transaction(
                    date=date,
                    description=description,
                    type=type,
                    category_id=category_id,
                    amount=amount,
                    week_id=week_id,
                )
            )

        logger.info(
            "transaction_created",
            transaction_id=transaction.id,
            type=type.value,
            week_id=week_id,
        )
        return transaction

    async def delete_transaction(self, transaction_id: int) -> None:
        """
        Delete a transaction.

        Raises:
            TransactionNotFoundException: If transaction not found
        """
        async with self._uow.transaction("delete transaction"):
            if not await self._transaction_repo.delete(transaction_id):
                raise TransactionNotFoundException(transaction_id)

        logger.info("transaction_deleted", transaction_id=transaction_id)
