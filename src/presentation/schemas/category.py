"""Category-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities import TransactionType


class CategoryCreateSchema(BaseModel):
    """Schema for POST /v1/categories request body."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Category name",
        examples=["Comida"],
    )
    type: TransactionType = Field(
        ...,
        description="income or expense",
        examples=["expense"],
    )


class CategorySchema(BaseModel):
    """Schema for a category in responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    type: TransactionType
