"""Shared FastAPI dependency factories."""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from jobreport.db import get_db
from jobreport.services import DashboardService, HelpPageRegistry, JobResultService


def get_session(db: Session = Depends(get_db)) -> Session:
    """Expose the SQLAlchemy session (alias for clarity)."""
    return db


def get_job_result_service(session: Session = Depends(get_session)) -> JobResultService:
    return JobResultService(session)


def get_dashboard_service(session: Session = Depends(get_session)) -> DashboardService:
    return DashboardService(session)


def get_help_registry(request: Request) -> HelpPageRegistry:
    """Help pages loaded during application startup."""
    return request.app.state.help_pages
