"""Mortgage stress test at the regulatory qualifying rate"""

from dataclasses import replace

from mortgage_engine.domain.affordability import calculate_affordability, housing_costs
from mortgage_engine.domain.models import LoanTerms, StressTestResult
from mortgage_engine.domain.payment import calculate_payment, max_principal, to_monthly_payment
from mortgage_engine.utils.rounding import round_cents

# Borrowers qualify at the greater of contract rate + 2% and 5.25%.
# Both are fixed policy values, not settings.
STRESS_TEST_RATE_INCREASE = 2.0
MINIMUM_QUALIFYING_RATE = 5.25

# TDS share of gross income used as the common payment budget
STRESS_TEST_TDS_BUDGET = 0.4


def qualifying_rate(contract_rate: float) -> float:
    """Rate the borrower must qualify at"""
    return max(contract_rate + STRESS_TEST_RATE_INCREASE, MINIMUM_QUALIFYING_RATE)


def perform_stress_test(
    terms: LoanTerms,
    gross_annual_income: float,
    monthly_debts: float,
    property_tax: float = 0.0,
    heating_cost: float = 0.0,
    condo_fees: float = 0.0,
) -> StressTestResult:
    """
    Qualify ``terms`` at the stressed rate.

    Flow:
    1. Monthly-equivalent payment at the contract and stress rates
    2. Affordability at the stress rate (default GDS/TDS thresholds)
    3. Max borrowable principal at both rates from one payment budget:
       40% of gross monthly income less debts and fixed housing costs
    4. Pass/fail = affordability at the stress rate
    """
    stress_rate = qualifying_rate(terms.annual_rate)
    stressed_terms = replace(terms, annual_rate=stress_rate)

    monthly_at_contract = to_monthly_payment(calculate_payment(terms), terms.frequency)
    monthly_at_stress = to_monthly_payment(calculate_payment(stressed_terms), terms.frequency)

    affordability = calculate_affordability(
        stressed_terms,
        gross_annual_income,
        monthly_debts,
        property_tax,
        heating_cost,
        condo_fees,
    )

    gross_monthly_income = gross_annual_income / 12
    max_housing = STRESS_TEST_TDS_BUDGET * gross_monthly_income - monthly_debts
    max_payment = max(0.0, max_housing - housing_costs(0.0, property_tax, heating_cost, condo_fees))

    max_at_contract = max_principal(max_payment, terms.annual_rate, terms.amortization_years, terms.frequency)
    max_at_stress = max_principal(max_payment, stress_rate, terms.amortization_years, terms.frequency)

    return StressTestResult(
        contract_rate=round_cents(terms.annual_rate),
        stress_rate=round_cents(stress_rate),
        monthly_payment_at_contract=round_cents(monthly_at_contract),
        monthly_payment_at_stress=round_cents(monthly_at_stress),
        max_mortgage_at_contract=round_cents(max_at_contract),
        max_mortgage_at_stress=round_cents(max_at_stress),
        passes_stress_test=affordability.is_affordable,
        affordability_at_stress=affordability,
    )


def stress_test_impact(max_mortgage_at_contract: float, max_mortgage_at_stress: float) -> float:
    """Percentage of borrowing power lost to the stress test"""
    if max_mortgage_at_contract == 0:
        return 0.0
    reduction = max_mortgage_at_contract - max_mortgage_at_stress
    return round_cents(reduction / max_mortgage_at_contract * 100)


def qualifies_under_stress_test(
    terms: LoanTerms,
    gross_annual_income: float,
    monthly_debts: float,
    property_tax: float = 0.0,
    heating_cost: float = 0.0,
    condo_fees: float = 0.0,
) -> bool:
    return perform_stress_test(
        terms, gross_annual_income, monthly_debts, property_tax, heating_cost, condo_fees
    ).passes_stress_test
