"""
Weekly payment calculation for loan contracts.

Contracts are repaid in equal weekly installments. With a positive
interest rate the installment follows the fixed-payment annuity formula:

    payment = P * r / (1 - (1 + r) ** -n)

where P is the principal, n the number of weeks and r the weekly rate
(annual percent / 100 / weeks per year). With a zero rate the principal
is simply split evenly across the term.

All functions keep full float precision; use round_currency() only when
presenting a value.
"""

from .settings import LendingSettings, lending_settings


def weekly_rate(
    annual_rate_percent: float,
    settings: LendingSettings = lending_settings,
) -> float:
    """
    Convert an annual percentage rate to a weekly fractional rate.

    Example: 36 (36%/year) -> 0.36 / 52 ≈ 0.006923
    """
    return annual_rate_percent / 100 / settings.weeks_per_year


def _validate_terms(principal: float, annual_rate_percent: float, term_weeks: int) -> None:
    if isinstance(term_weeks, bool) or not isinstance(term_weeks, int):
        raise ValueError("term_weeks must be an integer")
    if term_weeks < 1:
        raise ValueError("term_weeks must be at least 1")
    if principal < 0:
        raise ValueError("principal cannot be negative")
    if annual_rate_percent < 0:
        raise ValueError("annual_rate_percent cannot be negative")


def compute_weekly_payment(
    principal: float,
    annual_rate_percent: float,
    term_weeks: int,
    settings: LendingSettings = lending_settings,
) -> float:
    """
    Compute the fixed weekly payment that repays a loan.

    Args:
        principal: Amount lent (>= 0)
        annual_rate_percent: Annual interest rate in percent (>= 0)
        term_weeks: Number of weekly payments (>= 1)
        settings: Lending settings (uses defaults if not provided)

    Returns:
        The weekly payment, unrounded

    Raises:
        ValueError: If any input is out of range
    """
    _validate_terms(principal, annual_rate_percent, term_weeks)

    rate = weekly_rate(annual_rate_percent, settings)
    if rate == 0:
        return principal / term_weeks

    return (principal * rate) / (1 - (1 + rate) ** -term_weeks)


def principal_from_payment(
    weekly_payment: float,
    annual_rate_percent: float,
    term_weeks: int,
    settings: LendingSettings = lending_settings,
) -> float:
    """
    Invert the annuity formula: the principal a weekly payment repays.

    Raises:
        ValueError: If any input is out of range
    """
    _validate_terms(weekly_payment, annual_rate_percent, term_weeks)

    rate = weekly_rate(annual_rate_percent, settings)
    if rate == 0:
        return weekly_payment * term_weeks

    return weekly_payment * (1 - (1 + rate) ** -term_weeks) / rate


def total_repayment(weekly_payment: float, term_weeks: int) -> float:
    """Total amount paid over the full term."""
    return weekly_payment * term_weeks


def round_currency(
    amount: float,
    settings: LendingSettings = lending_settings,
) -> float:
    """Round an amount for display."""
    return round(amount, settings.display_decimals)
