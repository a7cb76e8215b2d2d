"""Test configuration and fixtures."""

import os
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ["TESTING"] = "true"

from jobreport.db import Base, get_db  # noqa: E402
from jobreport.db.models import JobHeuristicResult, JobResult  # noqa: E402
from jobreport.main import app  # noqa: E402 - must set env vars before importing
from jobreport.services import dashboard_cache  # noqa: E402

# Use in-memory SQLite for tests
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

BASE_TIME = datetime(2020, 1, 1, 12, 0, 0)


@pytest.fixture(autouse=True)
def reset_dashboard_cache():
    dashboard_cache.invalidate()
    yield
    dashboard_cache.invalidate()


@pytest.fixture
def db_session():
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """Create a test client with overridden database dependency."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_job(db_session):
    """Factory inserting a job result with sensible defaults."""
    counter = {"n": 0}

    def _make_job(job_id=None, heuristics=(), **fields):
        counter["n"] += 1
        n = counter["n"]
        values = {
            "job_id": job_id or f"job_{n:04d}",
            "job_name": f"job name {n}",
            "username": "alice",
            "job_type": "Pig",
            "severity": 0,
            "analysis_time": BASE_TIME + timedelta(minutes=n),
            "url": f"http://jobtracker/job_{n}",
            "job_exec_url": f"http://scheduler/exec/{n}",
            "job_url": f"http://scheduler/job/{n}",
            "flow_exec_url": f"http://scheduler/flowexec/{n}",
            "flow_url": "http://scheduler/flow/main",
        }
        values.update(fields)
        job = JobResult(**values)
        for analysis_name, severity in heuristics:
            job.heuristic_results.append(
                JobHeuristicResult(analysis_name=analysis_name, severity=severity)
            )
        db_session.add(job)
        db_session.commit()
        db_session.refresh(job)
        return job

    return _make_job


@pytest.fixture
def flow_pair(make_job):
    """Two flow executions sharing the job definitions ``a`` and ``b``."""
    flow1 = "http://scheduler/flowexec/100"
    flow2 = "http://scheduler/flowexec/200"
    jobs = {
        "f1_a": make_job("f1_a", flow_exec_url=flow1, job_url="job/a", job_exec_url="exec/1a"),
        "f1_b": make_job("f1_b", flow_exec_url=flow1, job_url="job/b", job_exec_url="exec/1b"),
        "f1_c": make_job("f1_c", flow_exec_url=flow1, job_url="job/c", job_exec_url="exec/1c"),
        "f2_a": make_job("f2_a", flow_exec_url=flow2, job_url="job/a", job_exec_url="exec/2a"),
        "f2_b": make_job("f2_b", flow_exec_url=flow2, job_url="job/b", job_exec_url="exec/2b"),
        "f2_d": make_job("f2_d", flow_exec_url=flow2, job_url="job/d", job_exec_url="exec/2d"),
    }
    return flow1, flow2, jobs
