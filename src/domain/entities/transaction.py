"""Transaction entity representing an income or expense entry."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional


class TransactionType(str, Enum):
    """Direction of a ledger entry."""

    INCOME = "income"
    EXPENSE = "expense"


@dataclass
class Transaction:
    """
    A single income or expense recorded against a week.

    Attributes:
        date: Date the money moved
        description: Free-text description
        type: Whether this is income or an expense
        category_id: Category the entry belongs to
        amount: Positive amount
        week_id: Budget week the entry is booked against
    """

    date: date
    description: str
    type: TransactionType
    category_id: int
    amount: float
    week_id: int
    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def is_income(self) -> bool:
        return self.type == TransactionType.INCOME

    @property
    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE

    @property
    def signed_amount(self) -> float:
        """Amount with expenses as negative values."""
        return self.amount if self.is_income else -self.amount
