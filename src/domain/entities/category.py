"""Category entity used to classify ledger transactions."""

from dataclasses import dataclass
from typing import Optional

from .transaction import TransactionType


@dataclass
class Category:
    """An income or expense category."""

    name: str
    type: TransactionType
    id: Optional[int] = None
