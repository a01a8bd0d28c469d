"""Amortization schedule generation"""

import logging
from datetime import date
from typing import List

from mortgage_engine.domain.models import AmortizationEntry, LoanTerms
from mortgage_engine.domain.payment import calculate_payment
from mortgage_engine.domain.rates import payments_per_year, periodic_rate
from mortgage_engine.utils.date_utils import days_between_payments, generate_payment_dates
from mortgage_engine.utils.rounding import round_cents

logger = logging.getLogger(__name__)


def generate_amortization_schedule(
    terms: LoanTerms,
    start_date: date | None = None,
) -> List[AmortizationEntry]:
    """
    Build the payment-by-payment amortization table for ``terms``.

    Requirements:
    - One entry per payment: amortization_years * payments_per_year entries
    - Interest and running balance rounded to cents after every payment
    - Final payment absorbs whatever balance is left, so it ends at exactly 0
    - Payment dates step by 365 // payments_per_year days from start_date

    Rounding the balance itself (not only the displayed values) keeps sub-cent
    drift from compounding over up to 1,560 payments. Together with the final
    payment override this makes the schedule reconcile to the cent.

    Accelerated frequencies overpay and reach a zero balance early. Once the
    level payment exceeds what is owed, the principal portion is capped at the
    remaining balance and every later entry is zero.

    Example:
        $300,000 at 0% over 25 years monthly
        → 300 payments of $1,000.00, interest $0.00, last balance $0.00
    """
    if start_date is None:
        start_date = date.today()

    per_year = payments_per_year(terms.frequency)
    rate = periodic_rate(terms.annual_rate, per_year)
    total_payments = terms.amortization_years * per_year

    # Level payment rounded to cents once and reused for every regular entry
    level_payment = round_cents(calculate_payment(terms))
    balance = round_cents(terms.principal)

    dates = generate_payment_dates(start_date, total_payments, days_between_payments(per_year))

    schedule: List[AmortizationEntry] = []
    for number, payment_date in enumerate(dates, start=1):
        interest = round_cents(balance * rate)

        if number == total_payments:
            # Pay off exactly what is left
            principal = balance
            schedule.append(
                AmortizationEntry(
                    payment_number=number,
                    payment_date=payment_date,
                    payment_amount=round_cents(interest + principal),
                    principal_portion=round_cents(principal),
                    interest_portion=interest,
                    ending_balance=0.0,
                )
            )
            break

        principal = level_payment - interest
        payment = level_payment
        if principal > balance:
            # Early payoff (accelerated frequencies): never repay more than is owed
            principal = balance
            payment = interest + principal

        balance = max(0.0, round_cents(balance - principal))
        schedule.append(
            AmortizationEntry(
                payment_number=number,
                payment_date=payment_date,
                payment_amount=round_cents(payment),
                principal_portion=round_cents(principal),
                interest_portion=interest,
                ending_balance=balance,
            )
        )

    logger.debug(
        "Generated amortization schedule",
        extra={"payments": len(schedule), "frequency": terms.frequency.value, "level_payment": level_payment},
    )
    return schedule
