"""Prometheus metrics for the job report web service.

Metrics are exposed at the /metrics endpoint.

Metrics Categories:
- HTTP request metrics (latency, count, in progress)
- Search metrics (query shape chosen for each filtered search)
- Dashboard metrics (summary count refreshes)
"""

from prometheus_client import Counter, Gauge, Histogram, Info

APP_INFO = Info("jobreport_app", "Job report application information")

# HTTP Request metrics
HTTP_REQUESTS_TOTAL = Counter(
    "jobreport_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "jobreport_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

HTTP_REQUESTS_IN_PROGRESS = Gauge(
    "jobreport_http_requests_in_progress",
    "Number of HTTP requests currently in progress",
    ["method", "endpoint"],
)

# Search metrics
SEARCH_QUERIES_TOTAL = Counter(
    "jobreport_search_queries_total",
    "Filtered job searches by query shape",
    ["shape"],  # plain, username_index, join, join_username_index
)

# Dashboard metrics
DASHBOARD_REFRESHES_TOTAL = Counter(
    "jobreport_dashboard_refreshes_total",
    "Number of times the dashboard summary counts were recomputed",
)


def set_app_info(version: str, environment: str) -> None:
    """Set application info metric.

    Args:
        version: Application version string.
        environment: Deployment environment (development, staging, production).
    """
    APP_INFO.info({"version": version, "environment": environment})


def record_search(shape: str) -> None:
    SEARCH_QUERIES_TOTAL.labels(shape=shape).inc()


def record_dashboard_refresh() -> None:
    DASHBOARD_REFRESHES_TOTAL.inc()


def normalize_endpoint(path: str) -> str:
    """Replace numeric path segments with ``{id}`` to bound label cardinality."""
    return "/".join("{id}" if part.isdigit() else part for part in path.split("/"))
