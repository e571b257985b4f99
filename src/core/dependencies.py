"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.services import (
    CategoryService,
    ClientService,
    ContractService,
    TransactionService,
    WeekService,
)
from src.domain.interfaces import FolioGenerator
from src.infrastructure.database import SqlAlchemyUnitOfWork, get_db_session
from src.infrastructure.folio import TokenFolioGenerator
from src.infrastructure.repositories import (
    SqlAvalRepository,
    SqlCategoryRepository,
    SqlClientRepository,
    SqlContractRepository,
    SqlTransactionRepository,
    SqlWeekRepository,
)

DbSession = Annotated[AsyncSession, Depends(get_db_session)]


# Store dependencies
async def get_unit_of_work(session: DbSession) -> SqlAlchemyUnitOfWork:
    """Get a UnitOfWork bound to the request session."""
    return SqlAlchemyUnitOfWork(session)


def get_folio_generator() -> FolioGenerator:
    """Get the folio generation strategy."""
    return TokenFolioGenerator()


# Repository dependencies
async def get_category_repository(session: DbSession) -> SqlCategoryRepository:
    return SqlCategoryRepository(session)


async def get_client_repository(session: DbSession) -> SqlClientRepository:
    return SqlClientRepository(session)


async def get_aval_repository(session: DbSession) -> SqlAvalRepository:
    return SqlAvalRepository(session)


async def get_contract_repository(session: DbSession) -> SqlContractRepository:
    return SqlContractRepository(session)


async def get_transaction_repository(session: DbSession) -> SqlTransactionRepository:
    return SqlTransactionRepository(session)


async def get_week_repository(session: DbSession) -> SqlWeekRepository:
    return SqlWeekRepository(session)


UnitOfWorkDep = Annotated[SqlAlchemyUnitOfWork, Depends(get_unit_of_work)]


# Service dependencies
async def get_contract_service(
    client_repo: Annotated[SqlClientRepository, Depends(get_client_repository)],
    aval_repo: Annotated[SqlAvalRepository, Depends(get_aval_repository)],
    contract_repo: Annotated[SqlContractRepository, Depends(get_contract_repository)],
    uow: UnitOfWorkDep,
    folio_generator: Annotated[FolioGenerator, Depends(get_folio_generator)],
) -> ContractService:
    """Get a ContractService instance with all dependencies."""
    return ContractService(
        client_repository=client_repo,
        aval_repository=aval_repo,
        contract_repository=contract_repo,
        unit_of_work=uow,
        folio_generator=folio_generator,
    )


async def get_category_service(
    category_repo: Annotated[SqlCategoryRepository, Depends(get_category_repository)],
    uow: UnitOfWorkDep,
) -> CategoryService:
    return CategoryService(category_repository=category_repo, unit_of_work=uow)


async def get_client_service(
    client_repo: Annotated[SqlClientRepository, Depends(get_client_repository)],
) -> ClientService:
    return ClientService(client_repository=client_repo)


async def get_transaction_service(
    transaction_repo: Annotated[SqlTransactionRepository, Depends(get_transaction_repository)],
    uow: UnitOfWorkDep,
) -> TransactionService:
    return TransactionService(transaction_repository=transaction_repo, unit_of_work=uow)


async def get_week_service(
    week_repo: Annotated[SqlWeekRepository, Depends(get_week_repository)],
    transaction_repo: Annotated[SqlTransactionRepository, Depends(get_transaction_repository)],
    uow: UnitOfWorkDep,
) -> WeekService:
    return WeekService(
        week_repository=week_repo,
        transaction_repository=transaction_repo,
        unit_of_work=uow,
    )
