"""Client and aval Pydantic schemas."""

from datetime import date, datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class PersonInputSchema(BaseModel):
    """Personal and contact fields shared by clients and avales."""

    name: str = Field(..., min_length=1, max_length=255, examples=["María López"])
    birthdate: date = Field(..., examples=["1985-04-12"])
    voter_id: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="Voter credential key (clave de elector)",
    )
    address: str = Field(..., min_length=1)
    neighborhood: str = Field(..., min_length=1, max_length=255)
    zip_code: str = Field(
        ...,
        min_length=1,
        max_length=10,
        validation_alias=AliasChoices("zip_code", "zip"),
    )
    municipality: str = Field(..., min_length=1, max_length=255)
    state: str = Field(..., min_length=1, max_length=255)
    phone: str = Field(..., max_length=30)
    cellphone: str = Field(..., min_length=1, max_length=30)
    message_phone: str = Field(..., max_length=30)
    email: str = Field(..., max_length=255)

    @field_validator("name", "voter_id")
    @classmethod
    def strip_required(cls, v: str) -> str:
        """Ensure identifying fields are not just whitespace."""
        if not v.strip():
            raise ValueError("value cannot be empty or whitespace")
        return v.strip()


class ClientInputSchema(PersonInputSchema):
    """Client fields submitted with a new contract."""

    assignment: str = Field(..., max_length=255)
    promoter: str = Field(..., max_length=255)
    supervisor: str = Field(..., max_length=255)
    executive: str = Field(..., max_length=255)


class AvalInputSchema(PersonInputSchema):
    """Aval (guarantor) fields submitted with a new contract."""

    group: str = Field(..., max_length=100)


class ClientSchema(BaseModel):
    """Schema for a client in responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    birthdate: date
    voter_id: str
    address: str
    neighborhood: str
    zip_code: str
    municipality: str
    state: str
    phone: str
    cellphone: str
    message_phone: str
    email: str
    assignment: str
    promoter: str
    supervisor: str
    executive: str
    created_at: datetime
