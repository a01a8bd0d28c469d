"""Nominal to periodic rate conversion under semi-annual compounding"""

from typing import Dict

from mortgage_engine.domain.models import PaymentFrequency
from mortgage_engine.utils.rounding import round_rate

PAYMENTS_PER_YEAR: Dict[PaymentFrequency, int] = {
    PaymentFrequency.MONTHLY: 12,
    PaymentFrequency.SEMI_MONTHLY: 24,
    PaymentFrequency.BI_WEEKLY: 26,
    PaymentFrequency.WEEKLY: 52,
    PaymentFrequency.ACCELERATED_BI_WEEKLY: 26,
    PaymentFrequency.ACCELERATED_WEEKLY: 52,
}


def payments_per_year(frequency: PaymentFrequency | str) -> int:
    """Number of payments made in one year at ``frequency``"""
    return PAYMENTS_PER_YEAR[PaymentFrequency.parse(frequency)]


def periodic_rate(annual_rate: float, payments_per_year: int) -> float:
    """
    Convert a nominal annual rate (percent) to the rate per payment period.

    Canadian mortgages compound semi-annually, so the nominal rate is halved
    and re-compounded to the payment period:

        periodic = (1 + annual_rate / 100 / 2) ** (2 / payments_per_year) - 1

    The result is rounded to 10 decimal digits. Later steps raise it to
    powers of several hundred, so float noise is cut off here rather than
    amplified downstream. A 0 rate returns 0; callers own the zero-rate
    branch of any formula that divides by the rate.
    """
    semi_annual_rate = annual_rate / 100 / 2
    rate = (1 + semi_annual_rate) ** (2 / payments_per_year) - 1
    return round_rate(rate)
