"""Budget week entity and its dashboard summary."""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import List, Optional

from .transaction import Transaction

WEEK_LENGTH_DAYS = 7


@dataclass
class Week:
    """A 7-day budgeting period starting at start_date."""

    start_date: date
    budget: float
    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def end_date(self) -> date:
        """Last day of the week (inclusive)."""
        return self.start_date + timedelta(days=WEEK_LENGTH_DAYS - 1)

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date


@dataclass(frozen=True)
class WeekSummary:
    """Income, expense and budget totals for a single week."""

    week: Week
    income: float
    expenses: float
    transaction_count: int
    recent_transactions: List[Transaction]

    @property
    def balance(self) -> float:
        return self.income - self.expenses

    @property
    def budget_remaining(self) -> float:
        return self.week.budget - self.expenses

    @classmethod
    def from_transactions(
        cls,
        week: Week,
        transactions: List[Transaction],
        recent_limit: int = 5,
    ) -> "WeekSummary":
        """
        Build a summary from the transactions booked against a week.

        Args:
            week: The week being summarized
            transactions: Transactions for the week, newest first
            recent_limit: How many of the newest transactions to keep
        """
        income = sum(t.amount for t in transactions if t.is_income)
        expenses = sum(t.amount for t in transactions if t.is_expense)

        return cls(
            week=week,
            income=float(income),
            expenses=float(expenses),
            transaction_count=len(transactions),
            recent_transactions=list(transactions[:recent_limit]),
        )
