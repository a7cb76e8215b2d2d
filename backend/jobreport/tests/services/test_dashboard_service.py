"""Tests for dashboard counts and their cache."""

from datetime import timedelta

from jobreport.core.time import utcnow
from jobreport.services import DashboardService, DashboardStats, DashboardStatsCache


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def test_cache_refreshes_only_after_delay():
    clock = FakeClock()
    cache = DashboardStatsCache(fetch_delay=60, clock=clock)
    calls = []

    def compute():
        calls.append(clock.now)
        return DashboardStats(analyzed=len(calls))

    assert cache.get(compute).analyzed == 1
    clock.now += 30
    assert cache.get(compute).analyzed == 1
    clock.now += 31
    assert cache.get(compute).analyzed == 2
    assert len(calls) == 2


def test_invalidate_forces_refresh():
    cache = DashboardStatsCache(fetch_delay=60, clock=FakeClock())
    cache.get(lambda: DashboardStats(analyzed=1))
    cache.invalidate()
    assert cache.get(lambda: DashboardStats(analyzed=5)).analyzed == 5


def test_stats_count_last_day(db_session, make_job):
    now = utcnow()
    make_job("recent_critical", analysis_time=now - timedelta(hours=1), severity=4)
    make_job("recent_severe", analysis_time=now - timedelta(hours=2), severity=3)
    make_job("recent_low", analysis_time=now - timedelta(hours=3), severity=1)
    make_job("old_critical", analysis_time=now - timedelta(days=2), severity=4)

    service = DashboardService(db_session, cache=DashboardStatsCache(fetch_delay=60))

    assert service.stats() == DashboardStats(analyzed=3, severe=1, critical=1)


def test_stats_are_served_from_cache(db_session, make_job):
    now = utcnow()
    service = DashboardService(db_session, cache=DashboardStatsCache(fetch_delay=60))
    assert service.stats().analyzed == 0

    make_job("late", analysis_time=now - timedelta(minutes=5))
    assert service.stats().analyzed == 0


def test_latest_is_newest_first(db_session, make_job):
    now = utcnow()
    make_job("older", analysis_time=now - timedelta(hours=5))
    make_job("newer", analysis_time=now - timedelta(hours=1))
    make_job("stale", analysis_time=now - timedelta(days=3))

    latest = DashboardService(db_session).latest()

    assert [job.job_id for job in latest] == ["newer", "older"]
