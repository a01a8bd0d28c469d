"""POST /v1/report, /v1/prefill - dashboard analysis and document prefill"""

import logging
import time
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException

from mortgage_engine.api.dependencies import get_request_id
from mortgage_engine.api.v1.schemas import (
    AffordabilitySchema,
    DocumentAnalysisRequest,
    PrefillResponse,
    ReportRequest,
    ReportResponse,
    SensitivityPointSchema,
    StressTestSchema,
    TermComparisonSchema,
    YearlySummarySchema,
)
from mortgage_engine.domain.exceptions import InvalidInputError
from mortgage_engine.domain.models import DocumentAnalysis
from mortgage_engine.domain.prefill import prefill_from_document
from mortgage_engine.domain.report import build_mortgage_report
from mortgage_engine.domain.stress_test import stress_test_impact
from mortgage_engine.infrastructure.observability.logging import log_calculation
from mortgage_engine.infrastructure.observability.metrics import (
    record_affordability,
    record_calculation,
    record_stress_test,
)

router = APIRouter()


@router.post("/report", response_model=ReportResponse)
def create_report(request_body: ReportRequest, request_id: str = Depends(get_request_id)):
    """
    Run every dashboard analysis for one borrower.

    Flow:
    1. Build loan terms from the request
    2. Affordability and stress test at the contract/qualifying rates
    3. Rate sensitivity band, yearly amortization and term comparison
    4. Record metrics and return the combined report
    """
    start_time = time.time()

    try:
        report = build_mortgage_report(
            request_body.to_terms(),
            request_body.gross_annual_income,
            request_body.monthly_debts,
            request_body.property_tax,
            request_body.heating_cost,
            request_body.condo_fees,
            request_body.rate_step,
            request_body.range_above_below,
            request_body.candidate_years,
        )

    except InvalidInputError as e:
        logging.warning(f"Invalid report input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=400, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    stress = report.stress_test
    impact = stress_test_impact(stress.max_mortgage_at_contract, stress.max_mortgage_at_stress)

    record_calculation("report")
    record_affordability(report.affordability.is_affordable)
    record_stress_test(stress.passes_stress_test)
    log_calculation(
        request_id,
        "report",
        (time.time() - start_time) * 1000,
        is_affordable=report.affordability.is_affordable,
        passes_stress_test=stress.passes_stress_test,
    )

    return ReportResponse(
        affordability=AffordabilitySchema.from_result(report.affordability),
        stress_test=StressTestSchema.from_result(stress, impact),
        sensitivity=[SensitivityPointSchema(**asdict(p)) for p in report.sensitivity],
        yearly_summary=[YearlySummarySchema(**asdict(y)) for y in report.yearly_summary],
        term_comparison=[TermComparisonSchema(**asdict(c)) for c in report.term_comparison],
    )


@router.post("/prefill", response_model=PrefillResponse)
def create_prefill(request_body: DocumentAnalysisRequest, request_id: str = Depends(get_request_id)):
    """Turn a document-analysis result into calculator inputs"""
    analysis = DocumentAnalysis.from_dict(request_body.model_dump(exclude_none=True))
    prefill = prefill_from_document(analysis)

    record_calculation("prefill")
    logging.info(
        "Prefill built",
        extra={"request_id": request_id, "empty": prefill.is_empty(), "confidence": analysis.confidence},
    )

    return PrefillResponse(**asdict(prefill), confidence=analysis.confidence)
