"""Prometheus metrics for monitoring record intake, analysis outcomes, and LLM performance"""

from prometheus_client import Counter, Histogram

# Record metrics
records_created_counter = Counter(
    "finance_records_created_total",
    "Records added to the in-memory store",
    ["kind"],  # transaction | debt
)

records_deleted_counter = Counter(
    "finance_records_deleted_total",
    "Records removed from the in-memory store",
    ["kind"],
)

# Analysis metrics
analysis_counter = Counter(
    "finance_analysis_total",
    "Narrative analysis requests by outcome",
    ["outcome"],  # ok | no_data | error | busy
)

# LLM API metrics
llm_latency_histogram = Histogram(
    "llm_latency_seconds",
    "LLM API response time",
    buckets=[0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0, 120.0],
)

llm_failure_counter = Counter(
    "llm_failures_total",
    "Failed LLM API calls",
    ["reason"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_analysis(outcome: str) -> None:
    """Count an analysis request outcome"""
    analysis_counter.labels(outcome=outcome).inc()
