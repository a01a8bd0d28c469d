"""Combined mortgage analysis for one set of borrower inputs"""

from typing import Sequence

from mortgage_engine.domain.affordability import calculate_affordability
from mortgage_engine.domain.analytics import (
    DEFAULT_COMPARISON_TERMS,
    DEFAULT_RATE_RANGE,
    DEFAULT_RATE_STEP,
    compare_amortization_terms,
    sensitivity_analysis,
    yearly_amortization_summary,
)
from mortgage_engine.domain.models import LoanTerms, MortgageReport
from mortgage_engine.domain.stress_test import perform_stress_test


def build_mortgage_report(
    terms: LoanTerms,
    gross_annual_income: float,
    monthly_debts: float,
    property_tax: float = 0.0,
    heating_cost: float = 0.0,
    condo_fees: float = 0.0,
    rate_step: float = DEFAULT_RATE_STEP,
    range_above_below: float = DEFAULT_RATE_RANGE,
    candidate_years: Sequence[int] = DEFAULT_COMPARISON_TERMS,
) -> MortgageReport:
    """
    Main entry point: run every analysis the dashboard shows.

    Returns affordability, stress test, rate sensitivity, yearly amortization
    and amortization-period comparison for the same inputs.
    """
    return MortgageReport(
        terms=terms,
        affordability=calculate_affordability(
            terms, gross_annual_income, monthly_debts, property_tax, heating_cost, condo_fees
        ),
        stress_test=perform_stress_test(
            terms, gross_annual_income, monthly_debts, property_tax, heating_cost, condo_fees
        ),
        sensitivity=sensitivity_analysis(terms, rate_step, range_above_below),
        yearly_summary=yearly_amortization_summary(terms),
        term_comparison=compare_amortization_terms(terms, candidate_years),
    )
