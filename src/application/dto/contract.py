"""Data transfer objects for contract lifecycle operations."""

from dataclasses import dataclass, fields
from datetime import date
from typing import List, Optional

from src.domain.entities import Aval, Client, Contract


def _missing_text_fields(data, prefix: str) -> List[str]:
    errors = []
    for f in fields(data):
        value = getattr(data, f.name)
        if value is None or (isinstance(value, str) and not value.strip()):
            errors.append(f"{prefix}.{f.name} is required")
    return errors


@dataclass(frozen=True)
class ClientData:
    """Borrower fields supplied when creating a contract."""

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

    def to_entity(self) -> Client:
        return Client(**{f.name: getattr(self, f.name) for f in fields(self)})


@dataclass(frozen=True)
class AvalData:
    """Guarantor fields supplied when creating a contract."""

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
    group: str

    def to_entity(self) -> Aval:
        return Aval(**{f.name: getattr(self, f.name) for f in fields(self)})


@dataclass(frozen=True)
class ContractCreateRequest:
    """Input data for creating a contract with its client and aval."""

    client: ClientData
    aval: AvalData
    amount: float
    interest_rate: float
    term_weeks: int
    start_date: date
    weekly_payment: Optional[float] = None
    status: Optional[str] = None

    def validate(self) -> List[str]:
        errors = _missing_text_fields(self.client, "client")
        errors.extend(_missing_text_fields(self.aval, "aval"))

        if self.amount <= 0:
            errors.append("amount must be positive")

        if self.interest_rate < 0:
            errors.append("interest_rate cannot be negative")

        if self.term_weeks < 1:
            errors.append("term_weeks must be at least 1")

        if self.weekly_payment is not None and self.weekly_payment < 0:
            errors.append("weekly_payment cannot be negative")

        return errors


@dataclass(frozen=True)
class ContractCreated:
    """Result of a successful contract creation."""

    contract_id: int
    folio: str
    client_id: int
    aval_id: int
    weekly_payment: float


@dataclass(frozen=True)
class ContractDeleted:
    """Outcome of a contract deletion, including orphan cleanup."""

    contract_id: int
    client_removed: bool
    aval_removed: bool


@dataclass(frozen=True)
class PaymentQuote:
    """Weekly payment and totals for a prospective contract."""

    amount: float
    interest_rate: float
    term_weeks: int
    weekly_payment: float
    weekly_payment_rounded: float
    total_repayment: float
    total_interest: float


@dataclass(frozen=True)
class ContractResponse:
    """Contract details for display."""

    id: int
    folio: str
    client_id: int
    aval_id: int
    client_name: Optional[str]
    client_cellphone: Optional[str]
    amount: float
    interest_rate: float
    term_weeks: int
    weekly_payment: float
    total_repayment: float
    start_date: str
    status: str
    created_at: str

    @classmethod
    def from_entity(cls, contract: Contract) -> "ContractResponse":
        return cls(
            id=contract.id,
            folio=contract.folio,
            client_id=contract.client_id,
            aval_id=contract.aval_id,
            client_name=contract.client_name,
            client_cellphone=contract.client_cellphone,
            amount=round(contract.amount, 2),
            interest_rate=contract.interest_rate,
            term_weeks=contract.term_weeks,
            weekly_payment=round(contract.weekly_payment, 2),
            total_repayment=round(contract.total_repayment, 2),
            start_date=contract.start_date.isoformat(),
            status=contract.status,
            created_at=contract.created_at.isoformat(),
        )
