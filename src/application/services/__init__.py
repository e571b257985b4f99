"""Application services - use case orchestration."""

from .category_service import CategoryService
from .client_service import ClientService
from .contract_service import ContractService
from .transaction_service import TransactionService
from .week_service import WeekService

__all__ = [
    "CategoryService",
    "ClientService",
    "ContractService",
    "TransactionService",
    "WeekService",
]
