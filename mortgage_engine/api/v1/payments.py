"""POST /v1/payment, /v1/schedule, /v1/schedule/yearly - payment and amortization endpoints"""

import time
from dataclasses import asdict

from fastapi import APIRouter, Depends

from mortgage_engine.api.dependencies import get_request_id
from mortgage_engine.api.v1.schemas import (
    AmortizationEntrySchema,
    LoanTermsRequest,
    PaymentResponse,
    ScheduleRequest,
    ScheduleResponse,
    YearlySummaryResponse,
    YearlySummarySchema,
)
from mortgage_engine.domain.analytics import yearly_amortization_summary
from mortgage_engine.domain.payment import calculate_payment, to_monthly_payment, total_interest
from mortgage_engine.domain.rates import payments_per_year, periodic_rate
from mortgage_engine.domain.schedule import generate_amortization_schedule
from mortgage_engine.infrastructure.observability.logging import log_calculation
from mortgage_engine.infrastructure.observability.metrics import record_calculation, schedule_length_histogram
from mortgage_engine.utils.rounding import round_cents

router = APIRouter()


@router.post("/payment", response_model=PaymentResponse)
def get_payment(request_body: LoanTermsRequest, request_id: str = Depends(get_request_id)):
    """Level payment, its monthly equivalent and lifetime interest"""
    start_time = time.time()
    terms = request_body.to_terms()

    per_year = payments_per_year(terms.frequency)
    payment = calculate_payment(terms)

    record_calculation("payment")
    log_calculation(request_id, "payment", (time.time() - start_time) * 1000, frequency=terms.frequency.value)

    return PaymentResponse(
        payment=round_cents(payment),
        monthly_payment=round_cents(to_monthly_payment(payment, terms.frequency)),
        total_payments=terms.amortization_years * per_year,
        total_interest=round_cents(
            total_interest(terms.principal, payment, terms.frequency, terms.amortization_years)
        ),
        periodic_rate=periodic_rate(terms.annual_rate, per_year),
    )


@router.post("/schedule", response_model=ScheduleResponse)
def get_schedule(request_body: ScheduleRequest, request_id: str = Depends(get_request_id)):
    """
    Full amortization schedule.

    Returns:
        One entry per payment; the last entry always ends at a zero balance
    """
    start_time = time.time()
    schedule = generate_amortization_schedule(request_body.to_terms(), request_body.start_date)

    record_calculation("schedule")
    schedule_length_histogram.observe(len(schedule))
    log_calculation(request_id, "schedule", (time.time() - start_time) * 1000, payments=len(schedule))

    return ScheduleResponse(
        total_payments=len(schedule),
        total_interest=round_cents(sum(e.interest_portion for e in schedule)),
        entries=[AmortizationEntrySchema(**asdict(e)) for e in schedule],
    )


@router.post("/schedule/yearly", response_model=YearlySummaryResponse)
def get_yearly_summary(request_body: LoanTermsRequest, request_id: str = Depends(get_request_id)):
    """Amortization rolled up per year"""
    start_time = time.time()
    summary = yearly_amortization_summary(request_body.to_terms())

    record_calculation("yearly_summary")
    log_calculation(request_id, "yearly_summary", (time.time() - start_time) * 1000)

    return YearlySummaryResponse(years=[YearlySummarySchema(**asdict(y)) for y in summary])
