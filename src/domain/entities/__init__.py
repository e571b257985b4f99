"""Domain Entities - Core business objects."""

from .category import Category
from .contract import Contract, ContractStatus
from .person import Aval, Client
from .transaction import Transaction, TransactionType
from .week import Week, WeekSummary

__all__ = [
    "Aval",
    "Category",
    "Client",
    "Contract",
    "ContractStatus",
    "Transaction",
    "TransactionType",
    "Week",
    "WeekSummary",
]
