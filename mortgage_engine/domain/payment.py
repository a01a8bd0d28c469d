"""Level payment formula and its inverse"""

from dataclasses import replace

from mortgage_engine.domain.models import LoanTerms, PaymentFrequency
from mortgage_engine.domain.rates import payments_per_year, periodic_rate


def calculate_payment(terms: LoanTerms) -> float:
    """
    Level payment per period for ``terms``.

    Standard annuity formula:

        payment = L * c(1 + c)^n / ((1 + c)^n - 1)

    where c is the periodic rate and n the total number of payments.

    - 0% rate: straight-line ``principal / n``
    - Accelerated frequencies pay the monthly payment divided by 2 (bi-weekly)
      or 4 (weekly), which shortens the effective amortization

    The zero-rate branch is checked first, so an accelerated 0% loan pays
    ``principal / n`` like any other 0% loan.
    """
    per_year = payments_per_year(terms.frequency)
    total_payments = terms.amortization_years * per_year

    if terms.annual_rate == 0:
        return terms.principal / total_payments

    if terms.frequency.is_accelerated:
        monthly = calculate_payment(replace(terms, frequency=PaymentFrequency.MONTHLY))
        if terms.frequency == PaymentFrequency.ACCELERATED_BI_WEEKLY:
            return monthly / 2
        return monthly / 4

    c = periodic_rate(terms.annual_rate, per_year)
    numerator = c * (1 + c) ** total_payments
    denominator = (1 + c) ** total_payments - 1
    return terms.principal * (numerator / denominator)


def max_principal(
    payment: float,
    annual_rate: float,
    amortization_years: int,
    frequency: PaymentFrequency | str = PaymentFrequency.MONTHLY,
) -> float:
    """Largest principal that ``payment`` per period fully amortizes (inverse of calculate_payment)"""
    per_year = payments_per_year(frequency)
    total_payments = amortization_years * per_year

    if annual_rate == 0:
        return payment * total_payments

    c = periodic_rate(annual_rate, per_year)
    numerator = (1 + c) ** total_payments - 1
    denominator = c * (1 + c) ** total_payments
    return payment * (numerator / denominator)


def to_monthly_payment(payment: float, frequency: PaymentFrequency | str) -> float:
    """Monthly equivalent of a per-period payment"""
    return payment * payments_per_year(frequency) / 12


def total_interest(
    principal: float,
    payment: float,
    frequency: PaymentFrequency | str,
    amortization_years: int,
) -> float:
    """Interest paid if ``payment`` is made every period of the full amortization"""
    total_paid = payment * amortization_years * payments_per_year(frequency)
    return total_paid - principal
