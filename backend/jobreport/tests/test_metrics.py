"""Tests for Prometheus metrics module."""

from fastapi.testclient import TestClient
from prometheus_client import REGISTRY

from jobreport.core.metrics import (
    normalize_endpoint,
    record_dashboard_refresh,
    record_search,
    set_app_info,
)


def _sample(name: str, labels: dict | None = None) -> float:
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


class TestMetricsEndpoint:
    """Tests for the /metrics endpoint."""

    def test_metrics_endpoint_returns_prometheus_format(self, client: TestClient) -> None:
        response = client.get("/metrics")
        assert response.status_code == 200
        assert "text/plain" in response.headers["content-type"]

    def test_metrics_endpoint_contains_app_info(self, client: TestClient) -> None:
        response = client.get("/metrics")
        assert "jobreport_app_info" in response.text

    def test_metrics_endpoint_contains_http_metrics(self, client: TestClient) -> None:
        client.get("/health")

        content = client.get("/metrics").text
        assert "jobreport_http_requests_total" in content
        assert "jobreport_http_request_duration_seconds" in content

    def test_metrics_endpoint_lists_search_and_dashboard_metrics(self, client: TestClient) -> None:
        content = client.get("/metrics").text
        assert "# HELP jobreport_search_queries_total" in content
        assert "# HELP jobreport_dashboard_refreshes_total" in content


class TestAppInfoMetric:
    def test_set_app_info(self) -> None:
        set_app_info("1.0.0", "test")

        sample = REGISTRY.get_sample_value(
            "jobreport_app_info", {"version": "1.0.0", "environment": "test"}
        )
        assert sample == 1.0


class TestHTTPRequestMetrics:
    def test_middleware_counts_requests(self, client: TestClient) -> None:
        labels = {"method": "GET", "endpoint": "/health/live", "status_code": "200"}
        before = _sample("jobreport_http_requests_total", labels)

        client.get("/health/live")

        assert _sample("jobreport_http_requests_total", labels) == before + 1

    def test_middleware_records_duration(self, client: TestClient) -> None:
        labels = {"method": "GET", "endpoint": "/health"}
        before = _sample("jobreport_http_request_duration_seconds_count", labels)

        client.get("/health")

        assert _sample("jobreport_http_request_duration_seconds_count", labels) == before + 1

    def test_metrics_endpoint_is_not_counted(self, client: TestClient) -> None:
        labels = {"method": "GET", "endpoint": "/metrics", "status_code": "200"}
        before = _sample("jobreport_http_requests_total", labels)

        client.get("/metrics")

        assert _sample("jobreport_http_requests_total", labels) == before

    def test_normalize_endpoint_replaces_numeric_segments(self) -> None:
        assert normalize_endpoint("/rest/job/12345") == "/rest/job/{id}"
        assert normalize_endpoint("/search") == "/search"


class TestSearchMetrics:
    def test_record_search(self) -> None:
        before = _sample("jobreport_search_queries_total", {"shape": "join"})

        record_search("join")

        assert _sample("jobreport_search_queries_total", {"shape": "join"}) == before + 1

    def test_filtered_search_records_query_shape(self, client: TestClient) -> None:
        labels = {"shape": "username_index"}
        before = _sample("jobreport_search_queries_total", labels)

        client.get("/rest/search", params={"user": "alice"})

        assert _sample("jobreport_search_queries_total", labels) == before + 1


class TestDashboardMetrics:
    def test_record_dashboard_refresh(self) -> None:
        before = _sample("jobreport_dashboard_refreshes_total")

        record_dashboard_refresh()

        assert _sample("jobreport_dashboard_refreshes_total") == before + 1

    def test_dashboard_refreshes_once_within_fetch_delay(self, client: TestClient) -> None:
        before = _sample("jobreport_dashboard_refreshes_total")

        client.get("/")
        client.get("/")

        assert _sample("jobreport_dashboard_refreshes_total") == before + 1
