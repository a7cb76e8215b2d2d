"""Database module initialization."""

from .models import Base, JobHeuristicResult, JobResult
from .session import SessionLocal, engine, get_db
from .utils import create_tables

__all__ = [
    "Base",
    "JobHeuristicResult",
    "JobResult",
    "get_db",
    "engine",
    "SessionLocal",
    "create_tables",
]
