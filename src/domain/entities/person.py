"""Client and guarantor (aval) entities."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional


@dataclass
class Client:
    """
    A borrower attached to one or more contracts.

    Clients are only created as part of a contract and are removed
    once the last contract referencing them is deleted.
    """

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
    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass
class Aval:
    """
    A guarantor (co-signer) attached to one or more contracts.

    Shares the personal and contact fields of a client and adds the
    group the guarantor belongs to.
    """

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
    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
