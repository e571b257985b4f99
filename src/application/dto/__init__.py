"""Data Transfer Objects for application layer."""

from .contract import (
    AvalData,
    ClientData,
    ContractCreated,
    ContractCreateRequest,
    ContractDeleted,
    ContractResponse,
    PaymentQuote,
)

__all__ = [
    "AvalData",
    "ClientData",
    "ContractCreated",
    "ContractCreateRequest",
    "ContractDeleted",
    "ContractResponse",
    "PaymentQuote",
]
