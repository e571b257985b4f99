"""Loan contract entity."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional


class ContractStatus(str, Enum):
    """Well-known contract statuses. Any other free-text status is allowed."""

    ACTIVE = "activo"
    PENDING = "pendiente"
    COMPLETED = "completado"
    CANCELLED = "cancelado"


@dataclass
class Contract:
    """
    A loan contract binding one client and one aval.

    Attributes:
        folio: Unique human-readable code (e.g. CTR-18C3A9F2B4D10E7A)
        client_id: Borrower this contract belongs to
        aval_id: Guarantor backing this contract
        amount: Principal lent
        interest_rate: Annual interest rate in percent (36 means 36%)
        term_weeks: Number of weekly payments
        weekly_payment: Fixed weekly installment
        start_date: Date the contract starts
        status: Contract status, usually one of ContractStatus
    """

    folio: str
    client_id: int
    aval_id: int
    amount: float
    interest_rate: float
    term_weeks: int
    weekly_payment: float
    start_date: date
    status: str = ContractStatus.ACTIVE.value
    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    client_name: Optional[str] = None
    client_cellphone: Optional[str] = None

    @property
    def total_repayment(self) -> float:
        """Total amount paid over the life of the contract."""
        return self.weekly_payment * self.term_weeks
