"""Prometheus metrics for monitoring approval rates, offered amounts and period extensions"""

from prometheus_client import Counter, Histogram

from inbank_gateway.domain.models import Decision

# Decision metrics
decision_counter = Counter(
    "inbank_decision_total",
    "Total loan decisions made",
    ["outcome"],  # approved | declined
)

rejection_counter = Counter(
    "inbank_rejection_total",
    "Declined loan decisions by reason",
    ["reason"],  # invalid_personal_code | invalid_age | ... | no_valid_loan
)

approved_amount_histogram = Histogram(
    "inbank_approved_amount",
    "Approved loan amounts",
    buckets=[2000, 3000, 4000, 5000, 6000, 7000, 8000, 9000, 10000],
)

period_extension_histogram = Histogram(
    "inbank_period_extension_months",
    "Months added to the requested period to find a valid loan",
    buckets=[0, 1, 3, 6, 12, 24, 48],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_decision(decision: Decision, requested_period: int) -> None:
    """Record decision metrics for monitoring approval rates and offer distribution"""
    if not decision.is_approved:
        decision_counter.labels(outcome="declined").inc()
        rejection_counter.labels(reason=decision.error_code or "unknown").inc()
        return

    decision_counter.labels(outcome="approved").inc()
    approved_amount_histogram.observe(decision.loan_amount)
    period_extension_histogram.observe(decision.loan_period - requested_period)
