"""
Lending Module - contract pricing
"""

from .settings import LendingSettings, lending_settings
from .payment import (
    compute_weekly_payment,
    principal_from_payment,
    round_currency,
    total_repayment,
    weekly_rate,
)

__all__ = [
    # Settings
    "LendingSettings",
    "lending_settings",
    # Payment
    "compute_weekly_payment",
    "principal_from_payment",
    "round_currency",
    "total_repayment",
    "weekly_rate",
]
