"""Prometheus metrics for statement volume, format fallbacks, and HTTP latency"""

from prometheus_client import Counter, Histogram

# Statement metrics
statement_counter = Counter(
    "rental_store_statements_total",
    "Total statements rendered",
    ["format"],  # plain | html | ...
)

# No label: the requested name is client input (it goes to the log instead)
format_fallback_counter = Counter(
    "rental_store_format_fallbacks_total",
    "Statement requests for an unregistered format",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_statement(format_name: str) -> None:
    """Record a rendered statement under the format that actually produced it"""
    statement_counter.labels(format=format_name).inc()
