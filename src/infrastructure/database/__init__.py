"""Database infrastructure."""

from .connection import get_db_session, DatabaseSessionManager, db_manager
from .models import (
    Base,
    AvalModel,
    CategoryModel,
    ClientModel,
    ContractModel,
    TransactionModel,
    WeekModel,
)
from .unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "get_db_session",
    "DatabaseSessionManager",
    "db_manager",
    "Base",
    "AvalModel",
    "CategoryModel",
    "ClientModel",
    "ContractModel",
    "TransactionModel",
    "WeekModel",
    "SqlAlchemyUnitOfWork",
]
