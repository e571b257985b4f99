"""Transaction-related Pydantic schemas."""

from datetime import date as date_type

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities import TransactionType


class TransactionCreateSchema(BaseModel):
    """Schema for POST /v1/transactions request body."""

    date: date_type = Field(..., examples=["2025-01-07"])
    description: str = Field(..., max_length=500, examples=["Supermercado"])
    type: TransactionType = Field(..., examples=["expense"])
    category_id: int = Field(..., gt=0, examples=[1])
    amount: float = Field(..., gt=0, description="Positive amount", examples=[350.5])
    week_id: int = Field(..., gt=0, examples=[1])


class TransactionSchema(BaseModel):
    """Schema for a transaction in responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    date: date_type
    description: str
    type: TransactionType
    category_id: int
    amount: float
    week_id: int
