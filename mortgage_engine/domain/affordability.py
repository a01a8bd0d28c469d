"""GDS/TDS debt service ratios and maximum affordable mortgage"""

import math

from mortgage_engine.domain.exceptions import InvalidInputError
from mortgage_engine.domain.models import (
    AffordabilityResult,
    LoanTerms,
    MaxMortgageResult,
    PaymentFrequency,
    validate_rate_and_term,
)
from mortgage_engine.domain.payment import calculate_payment, max_principal, to_monthly_payment
from mortgage_engine.utils.rounding import round_cents

# Standard Canadian qualifying ratios (percent)
DEFAULT_GDS_THRESHOLD = 32.0
DEFAULT_TDS_THRESHOLD = 40.0

# Share of condo fees counted as a housing cost
CONDO_FEE_SHARE = 0.5


def housing_costs(
    monthly_payment: float,
    property_tax: float = 0.0,
    heating_cost: float = 0.0,
    condo_fees: float = 0.0,
) -> float:
    """Monthly housing costs: payment, property tax, heating and half of condo fees"""
    return monthly_payment + property_tax + heating_cost + condo_fees * CONDO_FEE_SHARE


def gds_ratio(monthly_housing_costs: float, gross_monthly_income: float) -> float:
    """Gross Debt Service ratio in percent; inf when there is no income"""
    if gross_monthly_income <= 0:
        return math.inf
    return monthly_housing_costs / gross_monthly_income * 100


def tds_ratio(monthly_housing_costs: float, monthly_debts: float, gross_monthly_income: float) -> float:
    """Total Debt Service ratio in percent; inf when there is no income"""
    if gross_monthly_income <= 0:
        return math.inf
    return (monthly_housing_costs + monthly_debts) / gross_monthly_income * 100


def calculate_affordability(
    terms: LoanTerms,
    gross_annual_income: float,
    monthly_debts: float,
    property_tax: float = 0.0,
    heating_cost: float = 0.0,
    condo_fees: float = 0.0,
    gds_threshold: float = DEFAULT_GDS_THRESHOLD,
    tds_threshold: float = DEFAULT_TDS_THRESHOLD,
) -> AffordabilityResult:
    """
    Test a mortgage against the borrower's income.

    The payment is normalized to a monthly equivalent before building housing
    costs. The loan is affordable when GDS <= gds_threshold and
    TDS <= tds_threshold; with no income both ratios are inf and the loan is
    never affordable.
    """
    monthly_payment = to_monthly_payment(calculate_payment(terms), terms.frequency)
    gross_monthly_income = gross_annual_income / 12

    costs = housing_costs(monthly_payment, property_tax, heating_cost, condo_fees)
    gds = gds_ratio(costs, gross_monthly_income)
    tds = tds_ratio(costs, monthly_debts, gross_monthly_income)

    return AffordabilityResult(
        gds_ratio=round_cents(gds),
        tds_ratio=round_cents(tds),
        monthly_housing_costs=round_cents(costs),
        monthly_payment=round_cents(monthly_payment),
        is_affordable=gds <= gds_threshold and tds <= tds_threshold,
        gds_threshold=gds_threshold,
        tds_threshold=tds_threshold,
    )


def max_affordable_mortgage(
    gross_annual_income: float,
    monthly_debts: float,
    annual_rate: float,
    amortization_years: int,
    property_tax: float = 0.0,
    heating_cost: float = 0.0,
    condo_fees: float = 0.0,
    gds_threshold: float = DEFAULT_GDS_THRESHOLD,
    tds_threshold: float = DEFAULT_TDS_THRESHOLD,
) -> MaxMortgageResult:
    """
    Work backwards from the ratio limits to the largest mortgage.

    Each ratio gives a housing budget; the smaller one binds. Fixed housing
    costs come off the budget to leave the payment, which is inverted at a
    monthly frequency. All results are floored at 0.
    """
    validate_rate_and_term(annual_rate, amortization_years)
    if not math.isfinite(gross_annual_income):
        raise InvalidInputError("Income must be a finite number")

    gross_monthly_income = gross_annual_income / 12

    budget_by_gds = gds_threshold / 100 * gross_monthly_income
    budget_by_tds = tds_threshold / 100 * gross_monthly_income - monthly_debts
    other_costs = housing_costs(0.0, property_tax, heating_cost, condo_fees)

    max_payment = max(0.0, min(budget_by_gds, budget_by_tds) - other_costs)

    def invert(payment: float) -> float:
        return max_principal(payment, annual_rate, amortization_years, PaymentFrequency.MONTHLY)

    return MaxMortgageResult(
        max_by_gds=max(0.0, round_cents(invert(budget_by_gds - other_costs))),
        max_by_tds=max(0.0, round_cents(invert(budget_by_tds - other_costs))),
        max_mortgage=max(0.0, round_cents(invert(max_payment))),
    )
