"""Contract-related Pydantic schemas."""

from datetime import date
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .person import AvalInputSchema, ClientInputSchema


class ContractCreateSchema(BaseModel):
    """Schema for POST /v1/contracts request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "client": {
                        "name": "María López",
                        "birthdate": "1985-04-12",
                        "voter_id": "LOPM850412MDF",
                        "address": "Av. Juárez 100",
                        "neighborhood": "Centro",
                        "zip_code": "06000",
                        "municipality": "Cuauhtémoc",
                        "state": "CDMX",
                        "phone": "5555555555",
                        "cellphone": "5511111111",
                        "message_phone": "5522222222",
                        "email": "maria@example.com",
                        "assignment": "Zona 1",
                        "promoter": "Juan",
                        "supervisor": "Ana",
                        "executive": "Luis",
                    },
                    "aval": {
                        "name": "Pedro Ruiz",
                        "birthdate": "1980-01-30",
                        "voter_id": "RUIP800130HDF",
                        "address": "Calle 5 #20",
                        "neighborhood": "Roma",
                        "zip_code": "06700",
                        "municipality": "Cuauhtémoc",
                        "state": "CDMX",
                        "phone": "5533333333",
                        "cellphone": "5544444444",
                        "message_phone": "5566666666",
                        "email": "pedro@example.com",
                        "group": "A",
                    },
                    "amount": 10000,
                    "interest_rate": 36,
                    "term_weeks": 52,
                    "start_date": "2025-01-06",
                    "status": "activo",
                }
            ]
        }
    )

    client: ClientInputSchema
    aval: AvalInputSchema
    amount: float = Field(
        ...,
        gt=0,
        description="Principal lent",
        examples=[10000],
    )
    interest_rate: float = Field(
        ...,
        ge=0,
        description="Annual interest rate in percent",
        validation_alias=AliasChoices("interest_rate", "interest"),
        examples=[36],
    )
    term_weeks: int = Field(
        ...,
        ge=1,
        description="Number of weekly payments",
        validation_alias=AliasChoices("term_weeks", "term"),
        examples=[52],
    )
    weekly_payment: Optional[float] = Field(
        None,
        ge=0,
        description="Weekly payment; computed from the terms when omitted",
        examples=[229.65],
    )
    start_date: date = Field(..., examples=["2025-01-06"])
    status: Optional[str] = Field(
        None,
        max_length=50,
        description="Contract status (activo, pendiente, completado, cancelado)",
        examples=["activo"],
    )


class ContractCreatedSchema(BaseModel):
    """Schema for the data returned by POST /v1/contracts."""

    id: int = Field(..., description="New contract id")
    folio: str = Field(..., description="Generated folio", examples=["CTR-18C3A9F2B4D10E7A"])
    client_id: int
    aval_id: int
    weekly_payment: float


class ContractSchema(BaseModel):
    """Schema for a contract in responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    folio: str
    client_id: int
    aval_id: int
    client_name: Optional[str] = None
    client_cellphone: Optional[str] = None
    amount: float
    interest_rate: float
    term_weeks: int
    weekly_payment: float
    total_repayment: float
    start_date: str
    status: str
    created_at: str


class QuoteRequestSchema(BaseModel):
    """Schema for POST /v1/contracts/quote request body."""

    amount: float = Field(..., ge=0, examples=[10000])
    interest_rate: float = Field(
        ...,
        ge=0,
        validation_alias=AliasChoices("interest_rate", "interest"),
        examples=[36],
    )
    term_weeks: int = Field(
        ...,
        ge=1,
        validation_alias=AliasChoices("term_weeks", "term"),
        examples=[52],
    )


class QuoteSchema(BaseModel):
    """Schema for a payment quote."""

    model_config = ConfigDict(from_attributes=True)

    amount: float
    interest_rate: float
    term_weeks: int
    weekly_payment: float = Field(..., description="Unrounded weekly payment")
    weekly_payment_rounded: float = Field(..., description="Weekly payment rounded to cents")
    total_repayment: float
    total_interest: float
