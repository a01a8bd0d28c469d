"""Unit tests for domain models"""

import math

import pytest

from mortgage_engine.domain.exceptions import InvalidInputError, UnknownFrequencyError
from mortgage_engine.domain.models import (
    MAX_AMORTIZATION_YEARS,
    MAX_ANNUAL_RATE,
    MAX_PRINCIPAL,
    DocumentAnalysis,
    LoanTerms,
    PaymentFrequency,
)


def test_loan_terms_default_frequency():
    terms = LoanTerms(principal=250_000, annual_rate=4.0, amortization_years=25)
    assert terms.frequency is PaymentFrequency.MONTHLY


def test_loan_terms_accepts_wire_frequency():
    terms = LoanTerms(250_000, 4.0, 25, "accelerated-weekly")
    assert terms.frequency is PaymentFrequency.ACCELERATED_WEEKLY
    assert terms.frequency.is_accelerated


def test_loan_terms_unknown_frequency():
    with pytest.raises(UnknownFrequencyError):
        LoanTerms(250_000, 4.0, 25, "quarterly")


def test_unknown_frequency_is_invalid_input():
    """Callers can catch every validation failure as InvalidInputError"""
    with pytest.raises(InvalidInputError):
        PaymentFrequency.parse("daily")


@pytest.mark.parametrize(
    "principal, rate, years",
    [
        (0, 5.0, 25),
        (-1, 5.0, 25),
        (250_000, -0.5, 25),
        (250_000, 5.0, 0),
        (250_000, 5.0, -5),
        (250_000, 5.0, 25.5),
        (250_000, 5.0, True),
        (math.inf, 5.0, 25),
        (math.nan, 5.0, 25),
        (2_000_000_000, 5.0, 25),
        (250_000, math.nan, 25),
        (250_000, 150.0, 25),
        (250_000, 1e9, 25),
        (250_000, 5.0, 51),
        (250_000, 5.0, 200_000),
    ],
)
def test_loan_terms_validation(principal, rate, years):
    with pytest.raises(InvalidInputError):
        LoanTerms(principal, rate, years)


def test_loan_terms_zero_rate_allowed():
    assert LoanTerms(100_000, 0, 10).annual_rate == 0


def test_loan_terms_frozen():
    terms = LoanTerms(100_000, 3.0, 10)
    with pytest.raises(AttributeError):
        terms.principal = 1


@pytest.mark.parametrize(
    "frequency, accelerated",
    [
        (PaymentFrequency.MONTHLY, False),
        (PaymentFrequency.SEMI_MONTHLY, False),
        (PaymentFrequency.BI_WEEKLY, False),
        (PaymentFrequency.WEEKLY, False),
        (PaymentFrequency.ACCELERATED_BI_WEEKLY, True),
        (PaymentFrequency.ACCELERATED_WEEKLY, True),
    ],
)
def test_is_accelerated(frequency, accelerated):
    assert frequency.is_accelerated is accelerated


def test_document_analysis_from_dict():
    analysis = DocumentAnalysis.from_dict(
        {
            "confidence": 0.87,
            "extractedIncome": 95000,
            "extractedDebts": [350, 125.5],
            "identifiedMortgageTerms": {"principal": 450000, "rate": 4.79, "amortization": 30},
            "rawText": "Mortgage commitment ...",
        }
    )

    assert analysis.confidence == 0.87
    assert analysis.extracted_income == 95000
    assert analysis.extracted_debts == [350, 125.5]
    assert analysis.identified_mortgage_terms.principal == 450000
    assert analysis.identified_mortgage_terms.rate == 4.79
    assert analysis.identified_mortgage_terms.amortization == 30
    assert analysis.raw_text.startswith("Mortgage")


def test_document_analysis_from_sparse_dict():
    analysis = DocumentAnalysis.from_dict({"confidence": 0.2})

    assert analysis.extracted_income is None
    assert analysis.extracted_debts == []
    assert analysis.identified_mortgage_terms.principal is None
    assert analysis.raw_text == ""


def test_loan_terms_accepts_limits():
    terms = LoanTerms(MAX_PRINCIPAL, MAX_ANNUAL_RATE, MAX_AMORTIZATION_YEARS, "weekly")
    assert terms.amortization_years == 50
