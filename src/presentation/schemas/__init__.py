"""Pydantic schemas for API request/response validation."""

from .category import CategoryCreateSchema, CategorySchema
from .common import CreatedSchema, Envelope
from .contract import (
    ContractCreateSchema,
    ContractCreatedSchema,
    ContractSchema,
    QuoteRequestSchema,
    QuoteSchema,
)
from .error import ErrorResponseSchema
from .person import AvalInputSchema, ClientInputSchema, ClientSchema
from .transaction import TransactionCreateSchema, TransactionSchema
from .week import WeekCreateSchema, WeekSchema, WeekSummarySchema

__all__ = [
    "AvalInputSchema",
    "CategoryCreateSchema",
    "CategorySchema",
    "ClientInputSchema",
    "ClientSchema",
    "ContractCreateSchema",
    "ContractCreatedSchema",
    "ContractSchema",
    "CreatedSchema",
    "Envelope",
    "ErrorResponseSchema",
    "QuoteRequestSchema",
    "QuoteSchema",
    "TransactionCreateSchema",
    "TransactionSchema",
    "WeekCreateSchema",
    "WeekSchema",
    "WeekSummarySchema",
]
