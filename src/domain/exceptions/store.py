"""Store-related domain exceptions."""

from .base import DomainException


class TransactionalFailureException(DomainException):
    """
    Raised when a step of a store transaction fails.

    The whole unit has been rolled back by the time this is raised.
    """

    def __init__(self, operation: str, reason: str):
        super().__init__(
            message=f"Failed to {operation}: {reason}",
            code="TRANSACTION_FAILED",
        )
        self.operation = operation
        self.reason = reason


class StoreUnavailableException(DomainException):
    """Raised when the store cannot be reached."""

    def __init__(self, reason: str):
        super().__init__(
            message=f"Store unavailable: {reason}",
            code="STORE_UNAVAILABLE",
        )
        self.reason = reason
