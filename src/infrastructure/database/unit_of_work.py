"""SQLAlchemy implementation of UnitOfWork."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from sqlalchemy.exc import DBAPIError, InterfaceError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.metrics import record_transaction_failure
from src.domain.exceptions import StoreUnavailableException, TransactionalFailureException
from src.domain.interfaces import UnitOfWork

logger = structlog.get_logger(__name__)


def _is_connectivity_error(exc: BaseException) -> bool:
    if isinstance(exc, (OperationalError, InterfaceError)):
        return True
    if isinstance(exc, DBAPIError) and exc.connection_invalidated:
        return True
    return isinstance(exc, (ConnectionError, OSError))


def _describe(exc: BaseException) -> str:
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc) or type(exc).__name__


class SqlAlchemyUnitOfWork(UnitOfWork):
    """
    Commits or rolls back the writes made through a shared AsyncSession.

    Repositories constructed with the same session take part in the
    transaction.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    @asynccontextmanager
    async def transaction(self, operation: str) -> AsyncGenerator[None, None]:
        try:
            yield
            await self._session.commit()
        except Exception as exc:
            await self._rollback(operation, exc)

            if isinstance(exc, (SQLAlchemyError, ConnectionError, OSError)):
                record_transaction_failure(operation)
                if _is_connectivity_error(exc):
                    raise StoreUnavailableException(_describe(exc)) from exc
                raise TransactionalFailureException(operation, _describe(exc)) from exc

            raise

    async def _rollback(self, operation: str, exc: Exception) -> None:
        logger.warning(
            "transaction_rolled_back",
            operation=operation,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        try:
            await self._session.rollback()
        except SQLAlchemyError as rollback_exc:
            logger.error(
                "transaction_rollback_failed",
                operation=operation,
                error=str(rollback_exc),
            )
