"""Pytest fixtures for testing"""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from mortgage_engine.api.main import create_app
from mortgage_engine.domain.models import LoanTerms, PaymentFrequency


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def start_date() -> date:
    return date(2025, 1, 1)


@pytest.fixture
def standard_terms() -> LoanTerms:
    """$400,000 at 5.5% over 25 years, monthly"""
    return LoanTerms(
        principal=400_000,
        annual_rate=5.5,
        amortization_years=25,
        frequency=PaymentFrequency.MONTHLY,
    )


@pytest.fixture
def interest_free_terms() -> LoanTerms:
    """$300,000 at 0% over 25 years, monthly"""
    return LoanTerms(
        principal=300_000,
        annual_rate=0.0,
        amortization_years=25,
        frequency=PaymentFrequency.MONTHLY,
    )


@pytest.fixture
def borrower_payload() -> dict:
    """Request body for a typical first-time buyer"""
    return {
        "principal": 400000,
        "annual_rate": 5.5,
        "amortization_years": 25,
        "frequency": "monthly",
        "gross_annual_income": 80000,
        "monthly_debts": 500,
    }
