"""Schemas module initialization."""

from .job_result import (
    CompareResponse,
    FlowPairResponse,
    JobHeuristicResultResponse,
    JobResultResponse,
)

__all__ = [
    "CompareResponse",
    "FlowPairResponse",
    "JobHeuristicResultResponse",
    "JobResultResponse",
]
