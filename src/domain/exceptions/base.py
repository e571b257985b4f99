"""Base domain exceptions."""


class DomainException(Exception):
    """
    Base exception for all domain-level errors.

    Domain exceptions represent business rule violations or
    domain-specific error conditions.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class RecordNotFoundException(DomainException):
    """Raised when a referenced record does not exist."""

    entity = "record"

    def __init__(self, record_id: object):
        super().__init__(
            message=f"{self.entity.capitalize()} not found: {record_id}",
            code=f"{self.entity.upper()}_NOT_FOUND",
        )
        self.record_id = record_id


class InvalidRequestException(DomainException):
    """Raised when a request is malformed or misses a required value."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_REQUEST",
        )
