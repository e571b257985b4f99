"""Repository implementations."""

from .category_repository import SqlCategoryRepository
from .contract_repository import SqlContractRepository
from .person_repository import SqlAvalRepository, SqlClientRepository
from .transaction_repository import SqlTransactionRepository
from .week_repository import SqlWeekRepository

__all__ = [
    "SqlAvalRepository",
    "SqlCategoryRepository",
    "SqlClientRepository",
    "SqlContractRepository",
    "SqlTransactionRepository",
    "SqlWeekRepository",
]
