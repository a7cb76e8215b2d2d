"""Job result queries."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional, Sequence

from sqlalchemy import func
from sqlalchemy.orm import Query, Session, selectinload

from jobreport.core.logging import get_logger
from jobreport.core.metrics import record_search
from jobreport.db import JobHeuristicResult, JobResult
from jobreport.domain.search import SearchFilters
from jobreport.repositories.base import SQLAlchemyRepository

logger = get_logger(__name__)

USERNAME_INDEX_HINT = "USE INDEX (ix_job_result_username)"


class QueryShape(str, Enum):
    """Precomputed statement shapes for the filtered search.

    The username shapes carry a MySQL index hint; other dialects drop it.
    """

    PLAIN = "plain"
    USERNAME_INDEX = "username_index"
    JOIN = "join"
    JOIN_WITH_USERNAME_INDEX = "join_username_index"

    @classmethod
    def for_filters(cls, filters: SearchFilters) -> "QueryShape":
        if filters.joins_heuristics:
            return cls.JOIN_WITH_USERNAME_INDEX if filters.username else cls.JOIN
        return cls.USERNAME_INDEX if filters.username else cls.PLAIN

    @property
    def uses_username_index(self) -> bool:
        return self in (QueryShape.USERNAME_INDEX, QueryShape.JOIN_WITH_USERNAME_INDEX)

    @property
    def joins_heuristics(self) -> bool:
        return self in (QueryShape.JOIN, QueryShape.JOIN_WITH_USERNAME_INDEX)


class JobResultRepository(SQLAlchemyRepository[JobResult]):
    """Encapsulates job result queries."""

    model = JobResult

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def _base(self, shape: QueryShape = QueryShape.PLAIN) -> Query:
        query = self.session.query(JobResult)
        if shape.uses_username_index:
            query = query.with_hint(JobResult, USERNAME_INDEX_HINT, "mysql")
        if shape.joins_heuristics:
            query = query.join(JobResult.heuristic_results).distinct()
        return query

    def get_by_id(self, job_id: str) -> Optional[JobResult]:
        return (
            self.session.query(JobResult)
            .options(selectinload(JobResult.heuristic_results))
            .filter(JobResult.job_id == job_id)
            .first()
        )

    def list_by_flow_exec_url(self, flow_exec_url: str) -> Sequence[JobResult]:
        return (
            self.session.query(JobResult)
            .options(selectinload(JobResult.heuristic_results))
            .filter(JobResult.flow_exec_url == flow_exec_url)
            .all()
        )

    def list_by_job_exec_url(self, job_exec_url: str, *, limit: int) -> Sequence[JobResult]:
        return (
            self.session.query(JobResult)
            .options(selectinload(JobResult.heuristic_results))
            .filter(JobResult.job_exec_url == job_exec_url)
            .limit(limit)
            .all()
        )

    def list_by_job_url(self, job_url: str, *, limit: int) -> Sequence[JobResult]:
        """Executions of one job definition, capped to keep the page small."""
        return (
            self.session.query(JobResult)
            .options(selectinload(JobResult.heuristic_results))
            .filter(JobResult.job_url == job_url)
            .limit(limit)
            .all()
        )

    def search_query(self, filters: SearchFilters) -> Query:
        """Build the filtered query, without ordering or paging."""
        shape = QueryShape.for_filters(filters)
        logger.debug("Search query shape: %s", shape.value, extra={"shape": shape.value})
        record_search(shape.value)

        query = self._base(shape)
        if filters.username:
            query = query.filter(func.lower(JobResult.username) == filters.username)
        if filters.job_type:
            query = query.filter(JobResult.job_type == filters.job_type)
        if filters.severity is not None:
            if shape.joins_heuristics:
                query = query.filter(
                    JobHeuristicResult.analysis_name == filters.analysis,
                    JobHeuristicResult.severity >= filters.severity,
                )
            else:
                query = query.filter(JobResult.severity >= filters.severity)
        if filters.analysis_time_after is not None:
            query = query.filter(JobResult.analysis_time > filters.analysis_time_after)
        if filters.analysis_time_before is not None:
            query = query.filter(JobResult.analysis_time < filters.analysis_time_before)
        return query

    def search(self, filters: SearchFilters, *, offset: int, limit: int) -> Sequence[JobResult]:
        return (
            self.search_query(filters)
            .options(selectinload(JobResult.heuristic_results))
            .order_by(JobResult.analysis_time.desc(), JobResult.job_id)
            .offset(offset)
            .limit(limit)
            .all()
        )

    def count_analyzed_since(self, since: datetime, severity: Optional[int] = None) -> int:
        query = self.session.query(func.count(JobResult.job_id)).filter(
            JobResult.analysis_time > since
        )
        if severity is not None:
            query = query.filter(JobResult.severity == severity)
        return query.scalar() or 0

    def latest_since(self, since: datetime, *, limit: int) -> Sequence[JobResult]:
        return (
            self.session.query(JobResult)
            .options(selectinload(JobResult.heuristic_results))
            .filter(JobResult.analysis_time > since)
            .order_by(JobResult.analysis_time.desc())
            .limit(limit)
            .all()
        )
