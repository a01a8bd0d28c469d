"""POST /v1/affordability, /v1/max-mortgage, /v1/stress-test - borrower qualification"""

import time

from fastapi import APIRouter, Depends

from mortgage_engine.api.dependencies import get_request_id
from mortgage_engine.api.v1.schemas import (
    AffordabilityRequest,
    AffordabilitySchema,
    BorrowerRequest,
    MaxMortgageRequest,
    MaxMortgageResponse,
    StressTestSchema,
)
from mortgage_engine.domain.affordability import calculate_affordability, max_affordable_mortgage
from mortgage_engine.domain.stress_test import perform_stress_test, stress_test_impact
from mortgage_engine.infrastructure.observability.logging import log_calculation
from mortgage_engine.infrastructure.observability.metrics import (
    record_affordability,
    record_calculation,
    record_stress_test,
)

router = APIRouter()


@router.post("/affordability", response_model=AffordabilitySchema)
def get_affordability(request_body: AffordabilityRequest, request_id: str = Depends(get_request_id)):
    """
    GDS/TDS ratios for the mortgage against the borrower's income.

    Returns:
        Ratios in percent (null when income is zero) and the affordable flag
    """
    start_time = time.time()
    result = calculate_affordability(
        request_body.to_terms(),
        request_body.gross_annual_income,
        request_body.monthly_debts,
        request_body.property_tax,
        request_body.heating_cost,
        request_body.condo_fees,
        request_body.gds_threshold,
        request_body.tds_threshold,
    )

    record_calculation("affordability")
    record_affordability(result.is_affordable)
    log_calculation(
        request_id,
        "affordability",
        (time.time() - start_time) * 1000,
        is_affordable=result.is_affordable,
    )

    return AffordabilitySchema.from_result(result)


@router.post("/max-mortgage", response_model=MaxMortgageResponse)
def get_max_mortgage(request_body: MaxMortgageRequest, request_id: str = Depends(get_request_id)):
    """Largest mortgage the borrower's income supports under each ratio"""
    start_time = time.time()
    result = max_affordable_mortgage(
        request_body.gross_annual_income,
        request_body.monthly_debts,
        request_body.annual_rate,
        request_body.amortization_years,
        request_body.property_tax,
        request_body.heating_cost,
        request_body.condo_fees,
        request_body.gds_threshold,
        request_body.tds_threshold,
    )

    record_calculation("max_mortgage")
    log_calculation(request_id, "max_mortgage", (time.time() - start_time) * 1000)

    return MaxMortgageResponse(
        max_by_gds=result.max_by_gds,
        max_by_tds=result.max_by_tds,
        max_mortgage=result.max_mortgage,
    )


@router.post("/stress-test", response_model=StressTestSchema)
def get_stress_test(request_body: BorrowerRequest, request_id: str = Depends(get_request_id)):
    """Qualify the mortgage at max(contract rate + 2%, 5.25%)"""
    start_time = time.time()
    result = perform_stress_test(
        request_body.to_terms(),
        request_body.gross_annual_income,
        request_body.monthly_debts,
        request_body.property_tax,
        request_body.heating_cost,
        request_body.condo_fees,
    )
    impact = stress_test_impact(result.max_mortgage_at_contract, result.max_mortgage_at_stress)

    record_calculation("stress_test")
    record_stress_test(result.passes_stress_test)
    log_calculation(
        request_id,
        "stress_test",
        (time.time() - start_time) * 1000,
        stress_rate=result.stress_rate,
        passes_stress_test=result.passes_stress_test,
    )

    return StressTestSchema.from_result(result, impact)
