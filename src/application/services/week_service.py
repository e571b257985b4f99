"""Week service - handles budget week use cases."""

from datetime import date
from typing import List

import structlog

from src.domain.entities import Week, WeekSummary
from src.domain.exceptions import InvalidRequestException, WeekNotFoundException
from src.domain.interfaces import TransactionRepository, UnitOfWork, WeekRepository

logger = structlog.get_logger(__name__)


class WeekService:
    """
    Application service for budget weeks.

    Handles week bookkeeping and the weekly dashboard totals.
    """

    RECENT_TRANSACTIONS = 5

    def __init__(
        self,
        week_repository: WeekRepository,
        transaction_repository: TransactionRepository,
        unit_of_work: UnitOfWork,
    ):
        self._week_repo = week_repository
        self._transaction_repo = transaction_repository
        self._uow = unit_of_work

    async def list_weeks(self) -> List[Week]:
        """List weeks, most recent start date first."""
        return await self._week_repo.list()

    async def get_week(self, week_id: int) -> Week:
        week = await self._week_repo.get(week_id)

        if week is None:
            raise WeekNotFoundException(week_id)

        return week

    async def get_current_week(self, today: date | None = None) -> Week:
        """
        Return the week containing today.

        Falls back to the most recently started week when no week
        covers today.

        Raises:
            WeekNotFoundException: If there are no weeks at all
        """
        today = today or date.today()

        week = await self._week_repo.find_containing(today)
        if week is not None:
            return week

        weeks = await self._week_repo.list()
        if not weeks:
            raise WeekNotFoundException("current")

        logger.info("current_week_fallback", today=today.isoformat(), week_id=weeks[0].id)
        return weeks[0]

    async def summarize_week(self, week_id: int) -> WeekSummary:
        """
        Compute income, expenses, balance and remaining budget for a week.

        Raises:
            WeekNotFoundException: If week not found
        """
        week = await self.get_week(week_id)
        transactions = await self._transaction_repo.list(week_id=week_id)

        return WeekSummary.from_transactions(
            week,
            transactions,
            recent_limit=self.RECENT_TRANSACTIONS,
        )

    async def create_week(self, start_date: date, budget: float) -> Week:
        if budget < 0:
            raise InvalidRequestException("budget cannot be negative")

        async with self._uow.transaction("create week"):
            week = await self._week_repo.add(Week(start_date=start_date, budget=budget))

        logger.info("week_created", week_id=week.id, start_date=start_date.isoformat())
        return week

    async def delete_week(self, week_id: int) -> None:
        """
        Delete a week.

        Raises:
            WeekNotFoundException: If week not found
            TransactionalFailureException: If transactions are still booked against it
        """
        async with self._uow.transaction("delete week"):
            if not await self._week_repo.delete(week_id):
                raise WeekNotFoundException(week_id)

        logger.info("week_deleted", week_id=week_id)
