"""SQLAlchemy implementation of WeekRepository."""

from datetime import date, timedelta
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import Week
from src.domain.entities.week import WEEK_LENGTH_DAYS
from src.domain.interfaces import WeekRepository
from src.infrastructure.database.models import WeekModel


class SqlWeekRepository(WeekRepository):
    """SQL-backed week repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def list(self) -> List[Week]:
        stmt = select(WeekModel).order_by(WeekModel.start_date.desc(), WeekModel.id.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    async def get(self, week_id: int) -> Optional[Week]:
        model = await self._session.get(WeekModel, week_id)
        return self._to_entity(model) if model else None

    async def find_containing(self, day: date) -> Optional[Week]:
        earliest_start = day - timedelta(days=WEEK_LENGTH_DAYS - 1)
        stmt = (
            select(WeekModel)
            .where(WeekModel.start_date <= day, WeekModel.start_date >= earliest_start)
            .order_by(WeekModel.start_date.desc(), WeekModel.id.desc())
            .limit(1)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        return self._to_entity(model) if model else None

    async def add(self, week: Week) -> Week:
        model = WeekModel(
            start_date=week.start_date,
            budget=week.budget,
            created_at=week.created_at,
        )
        self._session.add(model)
        await self._session.flush()

        week.id = model.id
        return week

    async def delete(self, week_id: int) -> bool:
        result = await self._session.execute(
            delete(WeekModel).where(WeekModel.id == week_id)
        )
        return result.rowcount > 0

    def _to_entity(self, model: WeekModel) -> Week:
        return Week(
            id=model.id,
            start_date=model.start_date,
            budget=model.budget,
            created_at=model.created_at,
        )
