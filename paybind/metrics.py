"""
Prometheus Metrics for paybind

Provides counters and histograms for request monitoring.
Host application should expose the prometheus_client registry.
"""

import logging

from prometheus_client import Counter, Histogram

logger = logging.getLogger("paybind.metrics")

# Code "0" marks requests that never got an HTTP response
REQUEST_COUNT = Counter(
    "paybind_requests_total",
    "Total number of API requests",
    ["resource", "method", "code"],
)

REQUEST_LATENCY = Histogram(
    "paybind_request_latency_seconds",
    "API request latency in seconds",
    ["resource", "method"],
)


def resource_label(endpoint: str) -> str:
    """First path segment of an endpoint, e.g. 'payment_intents'."""
    return endpoint.strip("/").split("/", 1)[0] or "root"


def metrics_request(endpoint: str, method: str, code: int, latency: float) -> None:
    """
    Record metrics for one request.

    Args:
        endpoint: Request endpoint (ids are folded into the resource label)
        method: HTTP method
        code: HTTP status code, 0 when no response was received
        latency: Request duration in seconds
    """
    resource = resource_label(endpoint)
    try:
        REQUEST_COUNT.labels(resource=resource, method=method, code=str(code)).inc()
        REQUEST_LATENCY.labels(resource=resource, method=method).observe(latency)
    except Exception as e:
        # Metrics failures should not break requests
        logger.debug("Failed to record metrics: %s", e)
