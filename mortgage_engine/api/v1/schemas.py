"""Pydantic schemas for API request/response validation"""

import math
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from mortgage_engine.config import settings
from mortgage_engine.domain.analytics import MAX_COMPARISON_TERMS
from mortgage_engine.domain.models import (
    MAX_AMORTIZATION_YEARS,
    MAX_ANNUAL_RATE,
    MAX_PRINCIPAL,
    AffordabilityResult,
    LoanTerms,
    PaymentFrequency,
    StressTestResult,
)


def finite_or_none(value: float) -> Optional[float]:
    """JSON has no infinity; infinite ratios are sent as null"""
    return None if math.isinf(value) else value


class CalculationRequest(BaseModel):
    """Base for request bodies: inf and NaN are rejected on every float field"""

    model_config = ConfigDict(allow_inf_nan=False)


class LoanTermsRequest(CalculationRequest):
    """Loan parameters shared by every calculation request"""

    principal: float = Field(..., gt=0, le=MAX_PRINCIPAL, description="Loan amount")
    annual_rate: float = Field(..., ge=0, le=MAX_ANNUAL_RATE, description="Nominal annual rate in percent, e.g. 5.5")
    amortization_years: int = Field(
        default_factory=lambda: settings.default_amortization_years, gt=0, le=MAX_AMORTIZATION_YEARS
    )
    frequency: PaymentFrequency = PaymentFrequency.MONTHLY

    def to_terms(self) -> LoanTerms:
        return LoanTerms(
            principal=self.principal,
            annual_rate=self.annual_rate,
            amortization_years=self.amortization_years,
            frequency=self.frequency,
        )


class BorrowerRequest(LoanTermsRequest):
    """Loan parameters plus the borrower's income, debts and housing costs"""

    gross_annual_income: float = Field(..., ge=0, le=MAX_PRINCIPAL)
    monthly_debts: float = Field(0.0, ge=0, le=MAX_PRINCIPAL)
    property_tax: float = Field(0.0, ge=0, le=MAX_PRINCIPAL, description="Monthly property tax")
    heating_cost: float = Field(0.0, ge=0, le=MAX_PRINCIPAL, description="Monthly heating cost")
    condo_fees: float = Field(0.0, ge=0, le=MAX_PRINCIPAL, description="Monthly condo fees (50% counts)")


# --- Payment / schedule ---


class PaymentResponse(BaseModel):
    payment: float
    monthly_payment: float
    total_payments: int
    total_interest: float
    periodic_rate: float


class ScheduleRequest(LoanTermsRequest):
    start_date: Optional[date] = None


class AmortizationEntrySchema(BaseModel):
    payment_number: int
    payment_date: date
    payment_amount: float
    principal_portion: float
    interest_portion: float
    ending_balance: float


class ScheduleResponse(BaseModel):
    total_payments: int
    total_interest: float
    entries: List[AmortizationEntrySchema]


class YearlySummarySchema(BaseModel):
    year: int
    principal_paid: float
    interest_paid: float
    ending_balance: float
    total_paid: float


class YearlySummaryResponse(BaseModel):
    years: List[YearlySummarySchema]


# --- Analytics ---


class SensitivityRequest(LoanTermsRequest):
    rate_step: float = Field(default_factory=lambda: settings.sensitivity_rate_step, ge=0.01)
    range_above_below: float = Field(default_factory=lambda: settings.sensitivity_range, ge=0, le=10)


class SensitivityPointSchema(BaseModel):
    interest_rate: float
    monthly_payment: float
    total_interest: float
    total_cost: float


class SensitivityResponse(BaseModel):
    points: List[SensitivityPointSchema]


class CompareTermsRequest(LoanTermsRequest):
    candidate_years: List[int] = Field(
        default_factory=lambda: list(settings.comparison_terms), min_length=1, max_length=MAX_COMPARISON_TERMS
    )


class TermComparisonSchema(BaseModel):
    years: int
    monthly_payment: float
    total_interest: float
    total_cost: float


class CompareTermsResponse(BaseModel):
    comparisons: List[TermComparisonSchema]


class RateBreakevenRequest(CalculationRequest):
    principal: float = Field(..., gt=0, le=MAX_PRINCIPAL)
    fixed_rate: float = Field(..., ge=0, le=MAX_ANNUAL_RATE)
    variable_rate: float = Field(..., ge=0, le=MAX_ANNUAL_RATE)
    amortization_years: int = Field(
        default_factory=lambda: settings.default_amortization_years, gt=0, le=MAX_AMORTIZATION_YEARS
    )
    frequency: PaymentFrequency = PaymentFrequency.MONTHLY


class RateBreakevenResponse(BaseModel):
    monthly_difference: float
    breakeven_months: Optional[float] = Field(None, description="0 when variable is cheaper, null when unbounded")
    total_savings_variable: float


# --- Affordability / stress test ---


class AffordabilityRequest(BorrowerRequest):
    gds_threshold: float = Field(default_factory=lambda: settings.default_gds_threshold, gt=0, le=100)
    tds_threshold: float = Field(default_factory=lambda: settings.default_tds_threshold, gt=0, le=100)


class AffordabilitySchema(BaseModel):
    gds_ratio: Optional[float] = Field(None, description="Percent; null when income is zero")
    tds_ratio: Optional[float] = None
    monthly_housing_costs: float
    monthly_payment: float
    is_affordable: bool
    gds_threshold: float
    tds_threshold: float

    @classmethod
    def from_result(cls, result: AffordabilityResult) -> "AffordabilitySchema":
        return cls(
            gds_ratio=finite_or_none(result.gds_ratio),
            tds_ratio=finite_or_none(result.tds_ratio),
            monthly_housing_costs=result.monthly_housing_costs,
            monthly_payment=result.monthly_payment,
            is_affordable=result.is_affordable,
            gds_threshold=result.gds_threshold,
            tds_threshold=result.tds_threshold,
        )


class MaxMortgageRequest(CalculationRequest):
    gross_annual_income: float = Field(..., ge=0, le=MAX_PRINCIPAL)
    monthly_debts: float = Field(0.0, ge=0, le=MAX_PRINCIPAL)
    annual_rate: float = Field(..., ge=0, le=MAX_ANNUAL_RATE)
    amortization_years: int = Field(
        default_factory=lambda: settings.default_amortization_years, gt=0, le=MAX_AMORTIZATION_YEARS
    )
    property_tax: float = Field(0.0, ge=0, le=MAX_PRINCIPAL)
    heating_cost: float = Field(0.0, ge=0, le=MAX_PRINCIPAL)
    condo_fees: float = Field(0.0, ge=0, le=MAX_PRINCIPAL)
    gds_threshold: float = Field(default_factory=lambda: settings.default_gds_threshold, gt=0, le=100)
    tds_threshold: float = Field(default_factory=lambda: settings.default_tds_threshold, gt=0, le=100)


class MaxMortgageResponse(BaseModel):
    max_by_gds: float
    max_by_tds: float
    max_mortgage: float


class StressTestSchema(BaseModel):
    contract_rate: float
    stress_rate: float
    monthly_payment_at_contract: float
    monthly_payment_at_stress: float
    max_mortgage_at_contract: float
    max_mortgage_at_stress: float
    passes_stress_test: bool
    impact_pct: float = Field(..., description="Borrowing power lost to the stress test, percent")
    affordability_at_stress: AffordabilitySchema

    @classmethod
    def from_result(cls, result: StressTestResult, impact_pct: float) -> "StressTestSchema":
        return cls(
            contract_rate=result.contract_rate,
            stress_rate=result.stress_rate,
            monthly_payment_at_contract=result.monthly_payment_at_contract,
            monthly_payment_at_stress=result.monthly_payment_at_stress,
            max_mortgage_at_contract=result.max_mortgage_at_contract,
            max_mortgage_at_stress=result.max_mortgage_at_stress,
            passes_stress_test=result.passes_stress_test,
            impact_pct=impact_pct,
            affordability_at_stress=AffordabilitySchema.from_result(result.affordability_at_stress),
        )


# --- Report / prefill ---


class ReportRequest(BorrowerRequest):
    rate_step: float = Field(default_factory=lambda: settings.sensitivity_rate_step, ge=0.01)
    range_above_below: float = Field(default_factory=lambda: settings.sensitivity_range, ge=0, le=10)
    candidate_years: List[int] = Field(
        default_factory=lambda: list(settings.comparison_terms), min_length=1, max_length=MAX_COMPARISON_TERMS
    )


class ReportResponse(BaseModel):
    affordability: AffordabilitySchema
    stress_test: StressTestSchema
    sensitivity: List[SensitivityPointSchema]
    yearly_summary: List[YearlySummarySchema]
    term_comparison: List[TermComparisonSchema]


class IdentifiedMortgageTermsSchema(BaseModel):
    principal: Optional[float] = None
    rate: Optional[float] = None
    amortization: Optional[int] = None


class DocumentAnalysisRequest(CalculationRequest):
    """Document-analysis service payload (camelCase, as that service sends it)"""

    extractedIncome: Optional[float] = None
    extractedDebts: List[float] = Field(default_factory=list)
    identifiedMortgageTerms: Optional[IdentifiedMortgageTermsSchema] = None
    confidence: float = Field(0.0, ge=0, le=1)
    rawText: str = ""


class PrefillResponse(BaseModel):
    principal: Optional[float] = None
    annual_rate: Optional[float] = None
    amortization_years: Optional[int] = None
    gross_annual_income: Optional[float] = None
    monthly_debts: Optional[float] = None
    confidence: float
