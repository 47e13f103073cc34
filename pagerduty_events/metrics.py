"""Metrics for pagerduty-events."""

from prometheus_client.core import Counter, Histogram

# Buckets for calls to external APIs (seconds)
DEFAULT_BUCKETS_EXTERNAL_API = (0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0)

pagerduty_events_request = Counter(
    # Following naming convention (<prefix>_external_api_<component>_requests_total)
    name="pagerduty_events_external_api_requests_total",
    documentation="Total number of PagerDuty Events API requests",
    labelnames=["method", "verb"],
)

pagerduty_events_request_duration = Histogram(
    name="pagerduty_events_external_api_request_duration_seconds",
    documentation="PagerDuty Events API request duration in seconds",
    labelnames=["method", "verb"],
    buckets=DEFAULT_BUCKETS_EXTERNAL_API,
)

pagerduty_events_response = Counter(
    name="pagerduty_events_external_api_responses_total",
    documentation="PagerDuty Events API responses by event action and status code",
    labelnames=["event_action", "status_code"],
)
