"""Unit of work interface for atomic store operations."""

from abc import ABC, abstractmethod
from typing import AsyncContextManager


class UnitOfWork(ABC):
    """
    Groups repository writes into a single store transaction.

    Usage:
        async with uow.transaction("create contract"):
            await clients.add(client)
            await contracts.add(contract)

    Either every write inside the block is committed or, if anything
    raises, every write is rolled back.
    """

    @abstractmethod
    def transaction(self, operation: str) -> AsyncContextManager[None]:
        """
        Open a transactional scope.

        Args:
            operation: Short description used in error messages and logs

        Raises:
            TransactionalFailureException: If a store statement fails
            StoreUnavailableException: If the store cannot be reached
        """
        ...
