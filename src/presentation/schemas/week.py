"""Week-related Pydantic schemas."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from .transaction import TransactionSchema


class WeekCreateSchema(BaseModel):
    """Schema for POST /v1/weeks request body."""

    start_date: date = Field(..., examples=["2025-01-06"])
    budget: float = Field(..., ge=0, examples=[2500])


class WeekSchema(BaseModel):
    """Schema for a week in responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    start_date: date
    end_date: date = Field(..., description="start_date + 6 days")
    budget: float


class WeekSummarySchema(BaseModel):
    """Schema for GET /v1/weeks/{week_id}/summary."""

    model_config = ConfigDict(from_attributes=True)

    week: WeekSchema
    income: float
    expenses: float
    balance: float
    budget_remaining: float
    transaction_count: int
    recent_transactions: list[TransactionSchema]
