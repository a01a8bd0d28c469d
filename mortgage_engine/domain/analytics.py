"""Rate sensitivity, term comparison, yearly aggregation and rate breakeven"""

import math
from dataclasses import replace
from datetime import date
from typing import List, Sequence

from mortgage_engine.domain.exceptions import InvalidInputError
from mortgage_engine.domain.models import (
    MAX_ANNUAL_RATE,
    LoanTerms,
    PaymentFrequency,
    RateBreakeven,
    SensitivityPoint,
    TermComparison,
    YearlySummary,
)
from mortgage_engine.domain.payment import calculate_payment, to_monthly_payment, total_interest
from mortgage_engine.domain.rates import payments_per_year
from mortgage_engine.domain.schedule import generate_amortization_schedule
from mortgage_engine.utils.rounding import round_cents

MIN_SENSITIVITY_RATE = 0.1
DEFAULT_RATE_STEP = 0.25
DEFAULT_RATE_RANGE = 3.0
DEFAULT_COMPARISON_TERMS = (15, 20, 25, 30)

# Slack on the upper bound so float error in min + i * step cannot drop it
_RATE_EPSILON = 1e-9

# Upper bounds on work done per call
MAX_SENSITIVITY_POINTS = 401
MAX_COMPARISON_TERMS = 10


def sensitivity_analysis(
    terms: LoanTerms,
    rate_step: float = DEFAULT_RATE_STEP,
    range_above_below: float = DEFAULT_RATE_RANGE,
) -> List[SensitivityPoint]:
    """
    Payment and lifetime cost across a band of rates around ``terms.annual_rate``.

    Rates run from max(0.1, base - range) to base + range in ``rate_step``
    increments. Each rate is min_rate + i * rate_step rather than a running
    sum, and the upper bound gets a small tolerance so that a bound reachable
    by stepping is included. Exact endpoint inclusion is best-effort: a bound
    that is not a whole number of steps away is not emitted.

    The band stops at the highest valid rate, and a band wider than
    MAX_SENSITIVITY_POINTS points is rejected.
    """
    if rate_step <= 0:
        raise InvalidInputError("Rate step must be greater than zero")
    if range_above_below < 0:
        raise InvalidInputError("Rate range cannot be negative")

    min_rate = max(MIN_SENSITIVITY_RATE, terms.annual_rate - range_above_below)
    max_rate = min(MAX_ANNUAL_RATE, terms.annual_rate + range_above_below)

    point_count = math.floor((max_rate - min_rate) / rate_step + _RATE_EPSILON) + 1
    if point_count > MAX_SENSITIVITY_POINTS:
        raise InvalidInputError(
            f"Rate band yields {point_count} points; widen the step or narrow the range "
            f"to stay within {MAX_SENSITIVITY_POINTS}"
        )

    points: List[SensitivityPoint] = []
    step = 0
    rate = min_rate
    while rate <= max_rate + _RATE_EPSILON:
        payment = calculate_payment(replace(terms, annual_rate=min(rate, MAX_ANNUAL_RATE)))
        interest = total_interest(terms.principal, payment, terms.frequency, terms.amortization_years)

        points.append(
            SensitivityPoint(
                interest_rate=round_cents(rate),
                monthly_payment=round_cents(to_monthly_payment(payment, terms.frequency)),
                total_interest=round_cents(interest),
                total_cost=round_cents(terms.principal + interest),
            )
        )
        step += 1
        rate = min_rate + step * rate_step

    return points


def yearly_amortization_summary(
    terms: LoanTerms,
    start_date: date | None = None,
) -> List[YearlySummary]:
    """Roll the full schedule up into one row per amortization year"""
    schedule = generate_amortization_schedule(terms, start_date)
    per_year = payments_per_year(terms.frequency)

    summary: List[YearlySummary] = []
    for year in range(1, terms.amortization_years + 1):
        block = schedule[(year - 1) * per_year : year * per_year]
        if not block:
            break

        principal_paid = sum(e.principal_portion for e in block)
        interest_paid = sum(e.interest_portion for e in block)

        summary.append(
            YearlySummary(
                year=year,
                principal_paid=round_cents(principal_paid),
                interest_paid=round_cents(interest_paid),
                ending_balance=round_cents(block[-1].ending_balance),
                total_paid=round_cents(principal_paid + interest_paid),
            )
        )

    return summary


def compare_amortization_terms(
    terms: LoanTerms,
    candidate_years: Sequence[int] = DEFAULT_COMPARISON_TERMS,
) -> List[TermComparison]:
    """Payment and lifetime cost of the same loan over each candidate amortization"""
    if len(candidate_years) > MAX_COMPARISON_TERMS:
        raise InvalidInputError(f"At most {MAX_COMPARISON_TERMS} amortization periods can be compared")

    comparisons: List[TermComparison] = []
    for years in candidate_years:
        candidate = replace(terms, amortization_years=years)
        payment = calculate_payment(candidate)
        interest = total_interest(terms.principal, payment, terms.frequency, years)

        comparisons.append(
            TermComparison(
                years=years,
                monthly_payment=round_cents(to_monthly_payment(payment, terms.frequency)),
                total_interest=round_cents(interest),
                total_cost=round_cents(terms.principal + interest),
            )
        )
    return comparisons


def rate_breakeven(
    principal: float,
    fixed_rate: float,
    variable_rate: float,
    amortization_years: int,
    frequency: PaymentFrequency | str = PaymentFrequency.MONTHLY,
) -> RateBreakeven:
    """
    Compare a fixed rate against a variable rate on the same loan.

    With level payments and no prepayment there is no finite breakeven: the
    variable option either wins from month 0 or never. breakeven_months is
    therefore 0 when the variable payment is lower and inf otherwise.
    """
    fixed_terms = LoanTerms(principal, fixed_rate, amortization_years, frequency)
    variable_terms = replace(fixed_terms, annual_rate=variable_rate)

    fixed_payment = calculate_payment(fixed_terms)
    variable_payment = calculate_payment(variable_terms)

    monthly_difference = to_monthly_payment(fixed_payment, fixed_terms.frequency) - to_monthly_payment(
        variable_payment, fixed_terms.frequency
    )

    fixed_interest = total_interest(principal, fixed_payment, fixed_terms.frequency, amortization_years)
    variable_interest = total_interest(principal, variable_payment, fixed_terms.frequency, amortization_years)

    return RateBreakeven(
        monthly_difference=round_cents(monthly_difference),
        breakeven_months=0.0 if monthly_difference > 0 else math.inf,
        total_savings_variable=round_cents(fixed_interest - variable_interest),
    )
