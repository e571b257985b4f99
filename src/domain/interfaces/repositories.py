"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from src.domain.entities import (
    Aval,
    Category,
    Client,
    Contract,
    Transaction,
    TransactionType,
    Week,
)


class CategoryRepository(ABC):
    """Abstract repository for Category persistence."""

    @abstractmethod
    async def list(self, type: Optional[TransactionType] = None) -> List[Category]:
        """
        Retrieve categories, optionally restricted to one type.

        Returns:
            Categories ordered by type, then name
        """
        ...

    @abstractmethod
    async def get(self, category_id: int) -> Optional[Category]:
        ...

    @abstractmethod
    async def add(self, category: Category) -> Category:
        ...

    @abstractmethod
    async def delete(self, category_id: int) -> bool:
        ...


class ClientRepository(ABC):
    """
    Abstract repository for Client persistence.

    Implementations may use PostgreSQL, in-memory storage, etc.
    """

    @abstractmethod
    async def list(self, search: Optional[str] = None) -> List[Client]:
        """
        Retrieve clients ordered by name.

        Args:
            search: Optional case-insensitive substring of the client name
        """
        ...

    @abstractmethod
    async def get(self, client_id: int) -> Optional[Client]:
        """
        Retrieve a client by ID.

        Returns:
            The client if found, None otherwise
        """
        ...

    @abstractmethod
    async def get_for_update(self, client_id: int) -> Optional[Client]:
        """
        Retrieve a client and lock its row for the current transaction.

        Returns:
            The client if found, None otherwise
        """
        ...

    @abstractmethod
    async def add(self, client: Client) -> Client:
        """
        Insert a client.

        Returns:
            The client with its generated id populated
        """
        ...

    @abstractmethod
    async def delete(self, client_id: int) -> bool:
        """
        Delete a client.

        Returns:
            True if a row was removed
        """
        ...


class AvalRepository(ABC):
    """Abstract repository for Aval (guarantor) persistence."""

    @abstractmethod
    async def get(self, aval_id: int) -> Optional[Aval]:
        ...

    @abstractmethod
    async def get_for_update(self, aval_id: int) -> Optional[Aval]:
        """Retrieve an aval and lock its row for the current transaction."""
        ...

    @abstractmethod
    async def add(self, aval: Aval) -> Aval:
        """
        Insert an aval.

        Returns:
            The aval with its generated id populated
        """
        ...

    @abstractmethod
    async def delete(self, aval_id: int) -> bool:
        ...


class ContractRepository(ABC):
    """
    Abstract repository for Contract persistence.

    Contracts returned by list/get carry the client's name and
    cellphone for display.
    """

    @abstractmethod
    async def list(
        self,
        status: Optional[str] = None,
        search: Optional[str] = None,
    ) -> List[Contract]:
        """
        Retrieve contracts.

        Args:
            status: Only return contracts with this status
            search: Case-insensitive substring of the folio or client name

        Returns:
            Contracts ordered by created_at descending
        """
        ...

    @abstractmethod
    async def get(self, contract_id: int) -> Optional[Contract]:
        ...

    @abstractmethod
    async def get_for_update(self, contract_id: int) -> Optional[Contract]:
        """
        Retrieve a contract and lock its row for the current transaction.

        Returns:
            The contract if found, None otherwise
        """
        ...

    @abstractmethod
    async def add(self, contract: Contract) -> Contract:
        """
        Insert a contract.

        The referenced client and aval must already exist.
        """
        ...

    @abstractmethod
    async def delete(self, contract_id: int) -> bool:
        ...

    @abstractmethod
    async def count_by_client(self, client_id: int) -> int:
        """Count contracts referencing a client."""
        ...

    @abstractmethod
    async def count_by_aval(self, aval_id: int) -> int:
        """Count contracts referencing an aval."""
        ...


class TransactionRepository(ABC):
    """Abstract repository for Transaction persistence."""

    @abstractmethod
    async def list(
        self,
        week_id: Optional[int] = None,
        type: Optional[TransactionType] = None,
    ) -> List[Transaction]:
        """
        Retrieve transactions.

        Args:
            week_id: Only return transactions booked against this week
            type: Only return income or only expenses

        Returns:
            Transactions ordered by date descending
        """
        ...

    @abstractmethod
    async def get(self, transaction_id: int) -> Optional[Transaction]:
        ...

    @abstractmethod
    async def add(self, transaction: Transaction) -> Transaction:
        ...

    @abstractmethod
    async def delete(self, transaction_id: int) -> bool:
        ...


class WeekRepository(ABC):
    """Abstract repository for Week persistence."""

    @abstractmethod
    async def list(self) -> List[Week]:
        """
        Retrieve all weeks.

        Returns:
            Weeks ordered by start_date descending
        """
        ...

    @abstractmethod
    async def get(self, week_id: int) -> Optional[Week]:
        ...

    @abstractmethod
    async def find_containing(self, day: date) -> Optional[Week]:
        """
        Find the week whose 7-day span includes the given day.

        Returns:
            The most recently started matching week, None if none matches
        """
        ...

    @abstractmethod
    async def add(self, week: Week) -> Week:
        ...

    @abstractmethod
    async def delete(self, week_id: int) -> bool:
        ...
