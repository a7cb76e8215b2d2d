"""Domain layer primitives (filters, pagination, grouping, exceptions)."""

from . import exceptions
from .grouping import FlowPair, GroupBy, compare_flows, group_jobs
from .pagination import PaginationStats
from .search import SearchFilters
from .severity import Severity

__all__ = [
    "FlowPair",
    "GroupBy",
    "PaginationStats",
    "SearchFilters",
    "Severity",
    "compare_flows",
    "exceptions",
    "group_jobs",
]
