"""Prometheus metrics for dealer assignment validation."""

from prometheus_client import Counter, Histogram

validation_runs_total = Counter(
    "dealer_validation_runs_total",
    "Total dealer assignment validations",
    ["outcome"]  # outcome: proceed|blocked|malformed
)

validation_issues_total = Counter(
    "dealer_validation_issues_total",
    "Blocking validation errors emitted",
    ["issue_type"]
)

validation_duration_seconds = Histogram(
    "dealer_validation_duration_seconds",
    "Time spent validating a dealer assignment in seconds",
    buckets=[0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1]
)
