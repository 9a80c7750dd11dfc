"""
Prometheus metrics for userstream.

Tracks repository fetches, simulated API calls and update channel activity.
"""

from prometheus_client import Counter, Gauge, Histogram

# Repository metrics
repository_fetch_total = Counter(
    "userstream_repository_fetch_total",
    "Total repository fetch operations",
    ["operation", "status"],
)

repository_fetch_duration_seconds = Histogram(
    "userstream_repository_fetch_duration_seconds",
    "Repository fetch duration in seconds",
    ["operation"],
    buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.0, 2.5, 5.0, 10.0),
)

# Backend metrics
api_calls_total = Counter(
    "userstream_api_calls_total",
    "Total calls to the user API backend",
    ["provider"],
)

# Update channel metrics
channel_published_total = Counter(
    "userstream_channel_published_total",
    "Total items published to update channels",
    ["status"],
)

channel_subscribers = Gauge(
    "userstream_channel_subscribers",
    "Current number of active update channel subscriptions",
)


def track_fetch(operation: str, status: str, duration: float) -> None:
    """
    Record a repository fetch.

    Args:
        operation: Repository operation (fetch_all, fetch_by_id)
        status: Outcome (success, not_found, error)
        duration: Elapsed time in seconds
    """
    repository_fetch_total.labels(operation=operation, status=status).inc()
    repository_fetch_duration_seconds.labels(operation=operation).observe(duration)
