"""Job result schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class JobHeuristicResultResponse(BaseModel):
    """One heuristic check of a job."""

    id: int
    analysis_name: str
    severity: int
    severity_label: str
    data: Optional[dict] = None

    model_config = {"from_attributes": True}


class JobResultResponse(BaseModel):
    """Analysed job execution."""

    job_id: str
    job_name: str
    username: str
    job_type: str
    severity: int
    severity_label: str
    start_time: Optional[datetime] = None
    analysis_time: datetime
    url: str
    cluster: Optional[str] = None
    job_exec_url: Optional[str] = None
    job_url: Optional[str] = None
    flow_exec_url: Optional[str] = None
    flow_url: Optional[str] = None
    heuristic_results: list[JobHeuristicResultResponse] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class FlowPairResponse(BaseModel):
    """Jobs of one job definition in each compared flow execution."""

    first: list[JobResultResponse] = Field(default_factory=list)
    second: list[JobResultResponse] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class CompareResponse(BaseModel):
    """Two flow executions aligned by job definition URL."""

    flowurl1: Optional[str] = None
    flowurl2: Optional[str] = None
    jobs: dict[str, FlowPairResponse] = Field(default_factory=dict)
