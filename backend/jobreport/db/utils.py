"""Database utility helpers."""

from __future__ import annotations

from jobreport.core import settings
from jobreport.core.logging import get_logger
from jobreport.db.models import Base
from jobreport.db.session import engine

logger = get_logger(__name__)


def create_tables(bind=None) -> None:
    """Create the result tables when they are missing (development only).

    Production schemas are owned by the analysis pipeline and managed with
    Alembic, so this is a no-op there.
    """
    if settings.environment.lower() == "production":
        logger.info("Skipping table creation in production environment")
        return
    Base.metadata.create_all(bind=bind or engine)
    logger.info("Ensured job_result and job_heuristic_result tables exist")
