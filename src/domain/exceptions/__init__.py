"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException, InvalidRequestException, RecordNotFoundException
from .records import (
    CategoryNotFoundException,
    ClientNotFoundException,
    ContractNotFoundException,
    TransactionNotFoundException,
    WeekNotFoundException,
)
from .store import StoreUnavailableException, TransactionalFailureException

__all__ = [
    "DomainException",
    "InvalidRequestException",
    "RecordNotFoundException",
    "CategoryNotFoundException",
    "ClientNotFoundException",
    "ContractNotFoundException",
    "TransactionNotFoundException",
    "WeekNotFoundException",
    "StoreUnavailableException",
    "TransactionalFailureException",
]
