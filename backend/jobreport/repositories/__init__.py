"""Repository layer for persistence access."""

from .job_result_repository import JobResultRepository, QueryShape

__all__ = ["JobResultRepository", "QueryShape"]
