"""Not-found exceptions for each ledger entity."""

from .base import RecordNotFoundException


class CategoryNotFoundException(RecordNotFoundException):
    entity = "category"


class ClientNotFoundException(RecordNotFoundException):
    entity = "client"


class ContractNotFoundException(RecordNotFoundException):
    """Raised when a contract cannot be found."""

    entity = "contract"


class TransactionNotFoundException(RecordNotFoundException):
    entity = "transaction"


class WeekNotFoundException(RecordNotFoundException):
    """Raised when a week cannot be found (or no week exists at all)."""

    entity = "week"
