"""POST /v1/sensitivity, /v1/compare-terms, /v1/rate-breakeven - rate and term analytics"""

import time
from dataclasses import asdict

from fastapi import APIRouter, Depends

from mortgage_engine.api.dependencies import get_request_id
from mortgage_engine.api.v1.schemas import (
    CompareTermsRequest,
    CompareTermsResponse,
    RateBreakevenRequest,
    RateBreakevenResponse,
    SensitivityPointSchema,
    SensitivityRequest,
    SensitivityResponse,
    TermComparisonSchema,
    finite_or_none,
)
from mortgage_engine.domain.analytics import compare_amortization_terms, rate_breakeven, sensitivity_analysis
from mortgage_engine.infrastructure.observability.logging import log_calculation
from mortgage_engine.infrastructure.observability.metrics import record_calculation

router = APIRouter()


@router.post("/sensitivity", response_model=SensitivityResponse)
def get_sensitivity(request_body: SensitivityRequest, request_id: str = Depends(get_request_id)):
    """Payment and lifetime cost across a band of rates around the requested rate"""
    start_time = time.time()
    points = sensitivity_analysis(request_body.to_terms(), request_body.rate_step, request_body.range_above_below)

    record_calculation("sensitivity")
    log_calculation(request_id, "sensitivity", (time.time() - start_time) * 1000, points=len(points))

    return SensitivityResponse(points=[SensitivityPointSchema(**asdict(p)) for p in points])


@router.post("/compare-terms", response_model=CompareTermsResponse)
def get_term_comparison(request_body: CompareTermsRequest, request_id: str = Depends(get_request_id)):
    """Same loan over several amortization periods"""
    start_time = time.time()
    comparisons = compare_amortization_terms(request_body.to_terms(), request_body.candidate_years)

    record_calculation("compare_terms")
    log_calculation(request_id, "compare_terms", (time.time() - start_time) * 1000)

    return CompareTermsResponse(comparisons=[TermComparisonSchema(**asdict(c)) for c in comparisons])


@router.post("/rate-breakeven", response_model=RateBreakevenResponse)
def get_rate_breakeven(request_body: RateBreakevenRequest, request_id: str = Depends(get_request_id)):
    """Fixed vs variable rate comparison"""
    start_time = time.time()
    result = rate_breakeven(
        request_body.principal,
        request_body.fixed_rate,
        request_body.variable_rate,
        request_body.amortization_years,
        request_body.frequency,
    )

    record_calculation("rate_breakeven")
    log_calculation(request_id, "rate_breakeven", (time.time() - start_time) * 1000)

    return RateBreakevenResponse(
        monthly_difference=result.monthly_difference,
        breakeven_months=finite_or_none(result.breakeven_months),
        total_savings_variable=result.total_savings_variable,
    )
