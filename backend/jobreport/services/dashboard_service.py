"""Dashboard summary counts and latest analyses."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Optional, Sequence

from sqlalchemy.orm import Session

from jobreport.core.config import settings
from jobreport.core.logging import get_logger
from jobreport.core.metrics import record_dashboard_refresh
from jobreport.core.time import utcnow
from jobreport.db import JobResult
from jobreport.domain.severity import Severity
from jobreport.repositories import JobResultRepository

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class DashboardStats:
    analyzed: int = 0
    severe: int = 0
    critical: int = 0


class DashboardStatsCache:
    """Process-wide snapshot of the summary counts.

    The snapshot is recomputed at most once per ``fetch_delay`` seconds.
    Concurrent requests may both refresh; the lock only keeps the swap
    atomic.
    """

    def __init__(
        self,
        fetch_delay: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.fetch_delay = fetch_delay
        self._clock = clock
        self._lock = threading.Lock()
        self._stats = DashboardStats()
        self._last_fetch: Optional[float] = None

    def is_stale(self) -> bool:
        if self._last_fetch is None:
            return True
        return self._clock() - self._last_fetch > self.fetch_delay

    def get(self, compute: Callable[[], DashboardStats]) -> DashboardStats:
        if self.is_stale():
            stats = compute()
            with self._lock:
                self._stats = stats
                self._last_fetch = self._clock()
            record_dashboard_refresh()
            logger.info(
                "Refreshed dashboard counts",
                extra={"analyzed": stats.analyzed, "severe": stats.severe, "critical": stats.critical},
            )
        return self._stats

    def invalidate(self) -> None:
        with self._lock:
            self._last_fetch = None


dashboard_cache = DashboardStatsCache(settings.dashboard_fetch_delay_seconds)


class DashboardService:
    """Builds the home page data."""

    def __init__(self, session: Session, cache: DashboardStatsCache = dashboard_cache) -> None:
        self.results = JobResultRepository(session)
        self.cache = cache

    def _window_start(self):
        return utcnow() - timedelta(hours=settings.dashboard_window_hours)

    def _compute_stats(self) -> DashboardStats:
        since = self._window_start()
        return DashboardStats(
            analyzed=self.results.count_analyzed_since(since),
            severe=self.results.count_analyzed_since(since, Severity.SEVERE),
            critical=self.results.count_analyzed_since(since, Severity.CRITICAL),
        )

    def stats(self) -> DashboardStats:
        return self.cache.get(self._compute_stats)

    def latest(self) -> Sequence[JobResult]:
        return self.results.latest_since(
            self._window_start(), limit=settings.dashboard_latest_limit
        )
