"""Search filter parsing."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from jobreport.core.logging import get_logger

logger = get_logger(__name__)

DATE_FORMAT = "%m/%d/%Y"

# Query parameter names
FORM_JOB_ID = "jobid"
FORM_FLOW_URL = "flowurl"
FORM_USER = "user"
FORM_SEVERITY = "severity"
FORM_JOB_TYPE = "jobtype"
FORM_ANALYSIS = "analysis"
FORM_START_DATE = "start-date"
FORM_END_DATE = "end-date"
COMPARE_FLOW_URL1 = "flowurl1"
COMPARE_FLOW_URL2 = "flowurl2"


def clean(value: Optional[str]) -> Optional[str]:
    """Trim a raw parameter; blank values count as absent."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_date(raw: str, field: str) -> Optional[datetime]:
    """Parse an ``MM/dd/yyyy`` date, logging and returning None when malformed."""
    try:
        return datetime.strptime(raw, DATE_FORMAT)
    except ValueError:
        logger.error(
            "Error while parsing %s. %s is an invalid date. Filter not applied.",
            field,
            raw,
            extra={"field": field, "value": raw},
        )
        return None


@dataclass(slots=True)
class SearchFilters:
    """Optional predicates of a filtered job search.

    ``analysis_time_after`` is a strict lower bound and
    ``analysis_time_before`` a strict upper bound already moved to the day
    after the requested end date, so the end date is inclusive.
    """

    username: Optional[str] = None
    job_type: Optional[str] = None
    severity: Optional[int] = None
    analysis: Optional[str] = None
    analysis_time_after: Optional[datetime] = None
    analysis_time_before: Optional[datetime] = None

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> "SearchFilters":
        username = clean(params.get(FORM_USER))
        filters = cls(
            username=username.lower() if username else None,
            job_type=clean(params.get(FORM_JOB_TYPE)),
            analysis=clean(params.get(FORM_ANALYSIS)),
        )

        severity = clean(params.get(FORM_SEVERITY))
        if severity is not None:
            try:
                filters.severity = int(severity)
            except ValueError:
                logger.error("Invalid severity %r. Filter not applied.", severity)

        start = clean(params.get(FORM_START_DATE))
        if start is not None:
            filters.analysis_time_after = parse_date(start, "dateStart")

        end = clean(params.get(FORM_END_DATE))
        if end is not None:
            end_date = parse_date(end, "dateEnd")
            if end_date is not None:
                try:
                    filters.analysis_time_before = end_date + timedelta(days=1)
                except OverflowError:
                    # Nothing is analysed after the last representable day.
                    logger.error(
                        "Error while parsing dateEnd. %s is out of range. Filter not applied.",
                        end,
                        extra={"field": "dateEnd", "value": end},
                    )

        return filters

    @property
    def joins_heuristics(self) -> bool:
        """Severity combined with an analysis name filters on heuristic rows."""
        return self.severity is not None and self.analysis is not None
