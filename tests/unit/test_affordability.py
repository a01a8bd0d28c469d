"""Unit tests for GDS/TDS affordability and maximum mortgage"""

import math
from dataclasses import replace

import pytest

from mortgage_engine.domain.affordability import (
    calculate_affordability,
    gds_ratio,
    housing_costs,
    max_affordable_mortgage,
    tds_ratio,
)
from mortgage_engine.domain.exceptions import InvalidInputError
from mortgage_engine.domain.models import LoanTerms, PaymentFrequency
from mortgage_engine.domain.payment import calculate_payment, to_monthly_payment
from mortgage_engine.utils.rounding import round_cents


def test_gds_and_tds_ratios():
    assert gds_ratio(2000, 8000) == 25.0
    assert tds_ratio(2000, 800, 8000) == pytest.approx(35.0)


def test_ratios_infinite_without_income():
    assert math.isinf(gds_ratio(2000, 0))
    assert math.isinf(tds_ratio(2000, 500, -100))


def test_housing_costs_count_half_of_condo_fees():
    assert housing_costs(2000, property_tax=300, heating_cost=100, condo_fees=400) == 2600


def test_affordability_standard_scenario(standard_terms):
    """$80k income, $500 debts, $400k at 5.5% over 25 years"""
    result = calculate_affordability(standard_terms, gross_annual_income=80_000, monthly_debts=500)

    monthly_income = 80_000 / 12
    payment = to_monthly_payment(calculate_payment(standard_terms), PaymentFrequency.MONTHLY)

    assert result.monthly_payment == round_cents(payment)
    assert result.monthly_housing_costs == round_cents(payment)
    assert result.gds_ratio == pytest.approx(payment / monthly_income * 100, abs=0.01)
    assert result.tds_ratio == pytest.approx((payment + 500) / monthly_income * 100, abs=0.01)
    assert result.gds_threshold == 32
    assert result.tds_threshold == 40
    # ~36.6% GDS and ~44.1% TDS are over both limits
    assert result.is_affordable is False


def test_affordability_passes_with_higher_income(standard_terms):
    result = calculate_affordability(standard_terms, gross_annual_income=150_000, monthly_debts=500)

    assert result.gds_ratio <= 32
    assert result.tds_ratio <= 40
    assert result.is_affordable is True


def test_affordability_threshold_override(standard_terms):
    strict = calculate_affordability(
        standard_terms, 150_000, 500, gds_threshold=15, tds_threshold=20
    )
    assert strict.is_affordable is False
    assert strict.gds_threshold == 15


def test_affordability_includes_housing_costs(standard_terms):
    bare = calculate_affordability(standard_terms, 120_000, 0)
    loaded = calculate_affordability(
        standard_terms, 120_000, 0, property_tax=400, heating_cost=150, condo_fees=500
    )
    assert loaded.monthly_housing_costs == pytest.approx(bare.monthly_housing_costs + 800, abs=0.01)
    assert loaded.gds_ratio > bare.gds_ratio


def test_affordability_without_income(standard_terms):
    """No income: infinite ratios, never affordable"""
    result = calculate_affordability(standard_terms, gross_annual_income=0, monthly_debts=0)

    assert math.isinf(result.gds_ratio)
    assert math.isinf(result.tds_ratio)
    assert result.is_affordable is False


def test_affordability_normalizes_bi_weekly_payment(standard_terms):
    terms = replace(standard_terms, frequency=PaymentFrequency.BI_WEEKLY)
    result = calculate_affordability(terms, 100_000, 0)

    expected = calculate_payment(terms) * 26 / 12
    assert result.monthly_payment == round_cents(expected)


def test_max_affordable_mortgage_tds_binds():
    """Heavy debts make TDS the binding limit"""
    result = max_affordable_mortgage(
        gross_annual_income=100_000, monthly_debts=1_500, annual_rate=5.0, amortization_years=25
    )

    assert result.max_by_tds < result.max_by_gds
    assert result.max_mortgage == result.max_by_tds


def test_max_affordable_mortgage_gds_binds():
    result = max_affordable_mortgage(
        gross_annual_income=100_000, monthly_debts=0, annual_rate=5.0, amortization_years=25
    )

    assert result.max_by_gds < result.max_by_tds
    assert result.max_mortgage == result.max_by_gds


def test_max_affordable_mortgage_payment_fits_budget():
    """A mortgage at the max uses the whole GDS budget"""
    result = max_affordable_mortgage(gross_annual_income=96_000, monthly_debts=0, annual_rate=5.0, amortization_years=25)

    terms = LoanTerms(result.max_mortgage, 5.0, 25, PaymentFrequency.MONTHLY)
    assert calculate_payment(terms) == pytest.approx(0.32 * 8_000, abs=0.01)


def test_max_affordable_mortgage_zero_rate():
    result = max_affordable_mortgage(
        gross_annual_income=120_000, monthly_debts=0, annual_rate=0, amortization_years=25
    )
    # GDS budget 3,200/month for 300 months
    assert result.max_by_gds == 960_000
    assert result.max_mortgage == 960_000


def test_max_affordable_mortgage_floors_at_zero():
    result = max_affordable_mortgage(
        gross_annual_income=30_000, monthly_debts=2_000, annual_rate=5.0, amortization_years=25, property_tax=500
    )
    assert result.max_by_tds == 0
    assert result.max_mortgage == 0
    assert result.max_by_gds >= 0


def test_max_affordable_mortgage_no_income():
    result = max_affordable_mortgage(gross_annual_income=0, monthly_debts=0, annual_rate=5.0, amortization_years=25)
    assert result.max_by_gds == 0
    assert result.max_by_tds == 0
    assert result.max_mortgage == 0


def test_max_affordable_mortgage_rejects_bad_term():
    with pytest.raises(InvalidInputError):
        max_affordable_mortgage(100_000, 0, 5.0, 0)


@pytest.mark.parametrize(
    "annual_rate, years",
    [
        (5.0, 200_000),
        (5.0, 51),
        (1e9, 25),
        (math.nan, 25),
    ],
)
def test_max_affordable_mortgage_rejects_out_of_range_inputs(annual_rate, years):
    with pytest.raises(InvalidInputError):
        max_affordable_mortgage(100_000, 0, annual_rate, years)


def test_max_affordable_mortgage_rejects_infinite_income():
    with pytest.raises(InvalidInputError):
        max_affordable_mortgage(math.inf, 0, 5.0, 25)
