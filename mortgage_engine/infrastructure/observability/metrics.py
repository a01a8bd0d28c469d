"""Prometheus metrics for monitoring calculation volume, qualification outcomes and latency"""

from prometheus_client import Counter, Histogram

# Calculation metrics
calculation_counter = Counter(
    "mortgage_calculation_total",
    "Total calculations served",
    ["operation"],  # payment | schedule | sensitivity | affordability | ...
)

affordability_counter = Counter(
    "mortgage_affordability_total",
    "Affordability checks by outcome",
    ["outcome"],  # affordable | unaffordable
)

stress_test_counter = Counter(
    "mortgage_stress_test_total",
    "Stress tests by outcome",
    ["outcome"],  # pass | fail
)

schedule_length_histogram = Histogram(
    "mortgage_schedule_length",
    "Number of payments in generated amortization schedules",
    buckets=[60, 120, 240, 360, 520, 780, 1040, 1560],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(operation: str) -> None:
    calculation_counter.labels(operation=operation).inc()


def record_affordability(is_affordable: bool) -> None:
    outcome = "affordable" if is_affordable else "unaffordable"
    affordability_counter.labels(outcome=outcome).inc()


def record_stress_test(passed: bool) -> None:
    """Record stress test outcome for monitoring qualification rates"""
    outcome = "pass" if passed else "fail"
    stress_test_counter.labels(outcome=outcome).inc()
