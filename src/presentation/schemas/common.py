"""Response envelope shared by every endpoint."""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class Envelope(BaseModel, Generic[DataT]):
    """
    Standard success response: {"success": true, "data": ..., "message": ...}.
    """

    success: bool = Field(
        True,
        description="Whether the operation succeeded",
    )
    data: Optional[DataT] = Field(
        None,
        description="Operation payload, if any",
    )
    message: Optional[str] = Field(
        None,
        description="Human-readable outcome",
        examples=["Contrato creado correctamente"],
    )


class CreatedSchema(BaseModel):
    """Identifier of a newly created record."""

    id: int = Field(..., description="Identifier assigned by the store", examples=[1])
