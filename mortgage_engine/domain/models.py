"""Domain models - pure Python dataclasses representing mortgage calculations"""

import math
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional

from mortgage_engine.domain.exceptions import InvalidInputError, UnknownFrequencyError

# Largest inputs the solvers accept; beyond these (1 + c) ** n leaves float range
MAX_PRINCIPAL = 1_000_000_000.0
MAX_ANNUAL_RATE = 100.0
MAX_AMORTIZATION_YEARS = 50


class PaymentFrequency(str, Enum):
    """How often a mortgage payment is made"""

    MONTHLY = "monthly"
    SEMI_MONTHLY = "semi-monthly"
    BI_WEEKLY = "bi-weekly"
    WEEKLY = "weekly"
    ACCELERATED_BI_WEEKLY = "accelerated-bi-weekly"
    ACCELERATED_WEEKLY = "accelerated-weekly"

    @classmethod
    def parse(cls, value: "PaymentFrequency | str") -> "PaymentFrequency":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownFrequencyError(f"Unknown payment frequency: {value!r}")

    @property
    def is_accelerated(self) -> bool:
        return self in (PaymentFrequency.ACCELERATED_BI_WEEKLY, PaymentFrequency.ACCELERATED_WEEKLY)


@dataclass(frozen=True)
class LoanTerms:
    """Principal, nominal annual rate (percent), amortization and frequency"""

    principal: float
    annual_rate: float
    amortization_years: int
    frequency: PaymentFrequency = PaymentFrequency.MONTHLY

    def __post_init__(self) -> None:
        # frozen dataclass: coerce through object.__setattr__
        object.__setattr__(self, "frequency", PaymentFrequency.parse(self.frequency))

        if isinstance(self.amortization_years, bool) or not isinstance(self.amortization_years, int):
            raise InvalidInputError("Amortization period must be a whole number of years")
        if not math.isfinite(self.principal) or self.principal <= 0:
            raise InvalidInputError("Principal must be greater than zero")
        if self.principal > MAX_PRINCIPAL:
            raise InvalidInputError(f"Principal cannot exceed {MAX_PRINCIPAL:,.0f}")
        validate_rate_and_term(self.annual_rate, self.amortization_years)


def validate_rate_and_term(annual_rate: float, amortization_years: int) -> None:
    """Range checks shared by LoanTerms and the solvers that take a bare rate and term"""
    if not math.isfinite(annual_rate):
        raise InvalidInputError("Interest rate must be a finite number")
    if annual_rate < 0:
        raise InvalidInputError("Interest rate cannot be negative")
    if annual_rate > MAX_ANNUAL_RATE:
        raise InvalidInputError(f"Interest rate cannot exceed {MAX_ANNUAL_RATE:g}%")
    if amortization_years <= 0:
        raise InvalidInputError("Amortization period must be greater than zero")
    if amortization_years > MAX_AMORTIZATION_YEARS:
        raise InvalidInputError(f"Amortization period cannot exceed {MAX_AMORTIZATION_YEARS} years")


@dataclass(frozen=True)
class AmortizationEntry:
    """Single payment in an amortization schedule"""

    payment_number: int
    payment_date: date
    payment_amount: float
    principal_portion: float
    interest_portion: float
    ending_balance: float


@dataclass(frozen=True)
class AffordabilityResult:
    """GDS/TDS ratios for a mortgage against the borrower's income"""

    gds_ratio: float  # percent, inf when income <= 0
    tds_ratio: float
    monthly_housing_costs: float
    monthly_payment: float
    is_affordable: bool
    gds_threshold: float
    tds_threshold: float


@dataclass(frozen=True)
class MaxMortgageResult:
    """Largest principal supported by each debt service ratio"""

    max_by_gds: float
    max_by_tds: float
    max_mortgage: float


@dataclass(frozen=True)
class StressTestResult:
    """Outcome of qualifying a mortgage at the stressed rate"""

    contract_rate: float
    stress_rate: float
    monthly_payment_at_contract: float
    monthly_payment_at_stress: float
    max_mortgage_at_contract: float
    max_mortgage_at_stress: float
    passes_stress_test: bool
    affordability_at_stress: AffordabilityResult


@dataclass(frozen=True)
class SensitivityPoint:
    interest_rate: float
    monthly_payment: float
    total_interest: float
    total_cost: float


@dataclass(frozen=True)
class YearlySummary:
    year: int
    principal_paid: float
    interest_paid: float
    ending_balance: float
    total_paid: float


@dataclass(frozen=True)
class TermComparison:
    years: int
    monthly_payment: float
    total_interest: float
    total_cost: float


@dataclass(frozen=True)
class RateBreakeven:
    """Fixed vs variable comparison; breakeven_months is 0 or inf"""

    monthly_difference: float
    breakeven_months: float
    total_savings_variable: float


@dataclass(frozen=True)
class MortgageReport:
    """Everything the dashboard shows for one set of inputs"""

    terms: LoanTerms
    affordability: AffordabilityResult
    stress_test: StressTestResult
    sensitivity: List[SensitivityPoint]
    yearly_summary: List[YearlySummary]
    term_comparison: List[TermComparison]


@dataclass(frozen=True)
class IdentifiedMortgageTerms:
    principal: Optional[float] = None
    rate: Optional[float] = None
    amortization: Optional[int] = None


@dataclass(frozen=True)
class DocumentAnalysis:
    """Result returned by the external document-analysis service"""

    confidence: float = 0.0
    extracted_income: Optional[float] = None
    extracted_debts: List[float] = field(default_factory=list)
    identified_mortgage_terms: IdentifiedMortgageTerms = field(default_factory=IdentifiedMortgageTerms)
    raw_text: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DocumentAnalysis":
        """Build from the service's camelCase JSON payload"""
        terms = data.get("identifiedMortgageTerms") or {}
        return cls(
            confidence=float(data.get("confidence", 0.0)),
            extracted_income=data.get("extractedIncome"),
            extracted_debts=list(data.get("extractedDebts") or []),
            identified_mortgage_terms=IdentifiedMortgageTerms(
                principal=terms.get("principal"),
                rate=terms.get("rate"),
                amortization=terms.get("amortization"),
            ),
            raw_text=data.get("rawText", ""),
        )


@dataclass(frozen=True)
class CalculatorPrefill:
    """Calculator inputs recovered from a document; any field may be missing"""

    principal: Optional[float] = None
    annual_rate: Optional[float] = None
    amortization_years: Optional[int] = None
    gross_annual_income: Optional[float] = None
    monthly_debts: Optional[float] = None

    def is_empty(self) -> bool:
        return all(
            v is None
            for v in (
                self.principal,
                self.annual_rate,
                self.amortization_years,
                self.gross_annual_income,
                self.monthly_debts,
            )
        )
