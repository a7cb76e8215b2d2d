"""Service layer entry points."""

from .dashboard_service import DashboardService, DashboardStats, DashboardStatsCache, dashboard_cache
from .help_service import HelpPageRegistry
from .job_result_service import JobResultService, SearchPage

__all__ = [
    "DashboardService",
    "DashboardStats",
    "DashboardStatsCache",
    "HelpPageRegistry",
    "JobResultService",
    "SearchPage",
    "dashboard_cache",
]
