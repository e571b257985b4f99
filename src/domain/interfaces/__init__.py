"""
Domain Interfaces (Ports)
"""

from .folio import FolioGenerator
from .repositories import (
    AvalRepository,
    CategoryRepository,
    ClientRepository,
    ContractRepository,
    TransactionRepository,
    WeekRepository,
)
from .unit_of_work import UnitOfWork

__all__ = [
    "AvalRepository",
    "CategoryRepository",
    "ClientRepository",
    "ContractRepository",
    "FolioGenerator",
    "TransactionRepository",
    "UnitOfWork",
    "WeekRepository",
]
