"""Job result lookups, searches and comparisons."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional, Sequence

from sqlalchemy.orm import Session

from jobreport.core.config import settings
from jobreport.core.logging import get_logger
from jobreport.db import JobResult
from jobreport.domain.exceptions import BadRequestError, NotFoundError
from jobreport.domain.grouping import FlowPair, GroupBy, compare_flows, group_jobs
from jobreport.domain.pagination import MAX_PAGE, PAGE_PARAM, PaginationStats
from jobreport.domain.search import SearchFilters
from jobreport.repositories import JobResultRepository

logger = get_logger(__name__)


def require_param(value: Optional[str], message: str) -> str:
    """Return the trimmed parameter or raise ``BadRequestError``."""
    value = value.strip() if value else ""
    if not value:
        raise BadRequestError(message)
    return value


def parse_rest_page(raw: Optional[str]) -> int:
    if raw is None:
        return 1
    try:
        page = int(raw)
    except ValueError:
        page = None
    if page is None or page > MAX_PAGE:
        logger.error("Error parsing page number %r. Setting current page to 1.", raw)
        return 1
    return page if page > 0 else 1


@dataclass
class SearchPage:
    """One page of a filtered search, empty when the page is out of range."""

    pagination: Optional[PaginationStats] = None
    results: list[JobResult] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.results


class JobResultService:
    """Coordinates job result queries for the page and REST endpoints."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.results = JobResultRepository(session)

    # ------------------------------------------------------------------
    # Single lookups

    def get_job(self, job_id: str) -> JobResult:
        result = self.results.get_by_id(job_id)
        if result is None:
            raise NotFoundError(f"Unable to find record on job id: {job_id}")
        return result

    def flow_jobs(self, flow_exec_url: str) -> Sequence[JobResult]:
        return self.results.list_by_flow_exec_url(flow_exec_url)

    def flow_jobs_grouped(self, flow_exec_url: str) -> dict[Optional[str], list[JobResult]]:
        """Jobs of a flow execution keyed by job execution URL; 404 when none."""
        results = self.flow_jobs(flow_exec_url)
        if not results:
            raise NotFoundError(f"Unable to find record on flow exec url: {flow_exec_url}")
        return group_jobs(results, GroupBy.JOB_EXECUTION_URL)

    def job_exec_results(self, job_exec_url: str) -> Sequence[JobResult]:
        results = self.results.list_by_job_exec_url(
            job_exec_url, limit=settings.job_other_exec_limit
        )
        if not results:
            raise NotFoundError(f"Unable to find record on job exec url: {job_exec_url}")
        return results

    def other_executions(self, job_url: str) -> dict[Optional[str], list[JobResult]]:
        """Historic executions of a job definition keyed by job execution URL."""
        results = self.results.list_by_job_url(job_url, limit=settings.job_other_exec_limit)
        if not results:
            raise NotFoundError(f"Unable to find record on job definition url: {job_url}")
        return group_jobs(results, GroupBy.JOB_EXECUTION_URL)

    # ------------------------------------------------------------------
    # Searches

    def search_page(self, params: Mapping[str, str]) -> SearchPage:
        """Fetch the rows of the page bar and cut out the requested page."""
        stats = PaginationStats(
            page_length=settings.page_length, page_bar_length=settings.page_bar_length
        )
        stats.set_current_page_from(params.get(PAGE_PARAM))

        filters = SearchFilters.from_params(params)
        fetched = self.results.search(filters, offset=stats.fetch_offset, limit=stats.fetch_limit)
        stats.set_query_string(params)

        if stats.is_out_of_range(len(fetched)):
            return SearchPage()
        return SearchPage(pagination=stats, results=stats.page_slice(fetched))

    def rest_search(self, params: Mapping[str, str]) -> Sequence[JobResult]:
        page = parse_rest_page(params.get(PAGE_PARAM))
        filters = SearchFilters.from_params(params)
        page_length = settings.rest_page_length
        return self.results.search(filters, offset=(page - 1) * page_length, limit=page_length)

    # ------------------------------------------------------------------
    # Comparison

    def compare(
        self, flow_exec_url1: Optional[str], flow_exec_url2: Optional[str]
    ) -> dict[Optional[str], FlowPair]:
        """Compare two flow executions job by job; empty unless both URLs are given."""
        if not flow_exec_url1 or not flow_exec_url2:
            return {}
        return compare_flows(self.flow_jobs(flow_exec_url1), self.flow_jobs(flow_exec_url2))
