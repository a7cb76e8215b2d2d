"""Database models.

Both tables are populated by the upstream analysis pipeline; this service
only reads them.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import JSON, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from jobreport.domain.severity import Severity


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class JobResult(Base):
    """Analysis outcome for one job execution."""

    __tablename__ = "job_result"
    __table_args__ = (
        Index("ix_job_result_username", "username"),
        Index("ix_job_result_analysis_time", "analysis_time"),
        Index("ix_job_result_job_exec_url", "job_exec_url"),
        Index("ix_job_result_job_url", "job_url"),
        Index("ix_job_result_flow_exec_url", "flow_exec_url"),
    )

    job_id: Mapped[str] = mapped_column(String(50), primary_key=True)
    job_name: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    username: Mapped[str] = mapped_column(String(50), nullable=False)
    start_time: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    analysis_time: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    severity: Mapped[int] = mapped_column(Integer, nullable=False, default=Severity.NONE)
    job_type: Mapped[str] = mapped_column(String(20), nullable=False)
    url: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    cluster: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    job_exec_url: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    job_url: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    flow_exec_url: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    flow_url: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)

    heuristic_results: Mapped[list["JobHeuristicResult"]] = relationship(
        "JobHeuristicResult",
        back_populates="job",
        order_by="JobHeuristicResult.id",
    )

    @property
    def severity_label(self) -> str:
        return Severity.label_for(self.severity)

    def __repr__(self) -> str:
        return f"<JobResult {self.job_id} severity={self.severity}>"


class JobHeuristicResult(Base):
    """Outcome of one heuristic check applied to a job."""

    __tablename__ = "job_heuristic_result"
    __table_args__ = (
        Index("ix_job_heuristic_result_job_id", "job_id"),
        Index("ix_job_heuristic_result_analysis_severity", "analysis_name", "severity"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    job_id: Mapped[str] = mapped_column(String(50), ForeignKey("job_result.job_id"), nullable=False)
    analysis_name: Mapped[str] = mapped_column(String(128), nullable=False)
    severity: Mapped[int] = mapped_column(Integer, nullable=False, default=Severity.NONE)
    data: Mapped[Optional[dict]] = mapped_column(JSON, nullable=True)

    job: Mapped["JobResult"] = relationship("JobResult", back_populates="heuristic_results")

    @property
    def severity_label(self) -> str:
        return Severity.label_for(self.severity)
