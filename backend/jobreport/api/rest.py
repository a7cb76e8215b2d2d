"""JSON endpoints mirroring the search and comparison pages."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from jobreport.dependencies import get_job_result_service
from jobreport.domain.search import (
    COMPARE_FLOW_URL1,
    COMPARE_FLOW_URL2,
    FORM_FLOW_URL,
    FORM_JOB_ID,
    clean,
)
from jobreport.schemas import CompareResponse, FlowPairResponse, JobResultResponse
from jobreport.services import JobResultService
from jobreport.services.job_result_service import require_param

router = APIRouter(prefix="/rest", tags=["rest"])


def _serialize(results) -> list[JobResultResponse]:
    return [JobResultResponse.model_validate(result) for result in results]


@router.get("/job", response_model=JobResultResponse)
def job_result(
    job_id: Optional[str] = Query(None, alias="id"),
    service: JobResultService = Depends(get_job_result_service),
) -> JobResultResponse:
    """Single job result by job id."""
    job_id = require_param(job_id, "No job id provided.")
    return JobResultResponse.model_validate(service.get_job(job_id))


@router.get("/jobexec", response_model=list[JobResultResponse])
def job_exec_result(
    url: Optional[str] = Query(None),
    service: JobResultService = Depends(get_job_result_service),
) -> list[JobResultResponse]:
    """Job results recorded for a job execution URL."""
    job_exec_url = require_param(url, "No job exec url provided.")
    return _serialize(service.job_exec_results(job_exec_url))


@router.get("/flowexec", response_model=dict[str, list[JobResultResponse]])
def flow_exec_result(
    url: Optional[str] = Query(None),
    service: JobResultService = Depends(get_job_result_service),
) -> dict[str, list[JobResultResponse]]:
    """Jobs of a flow execution keyed by job execution URL."""
    flow_exec_url = require_param(url, "No flow exec url provided.")
    grouped = service.flow_jobs_grouped(flow_exec_url)
    return {key or "": _serialize(results) for key, results in grouped.items()}


@router.get("/search", response_model=JobResultResponse | list[JobResultResponse])
def search(
    request: Request,
    service: JobResultService = Depends(get_job_result_service),
) -> JobResultResponse | list[JobResultResponse]:
    """JSON variant of the search page, paged by ``rest_page_length`` rows."""
    params = request.query_params
    job_id = clean(params.get(FORM_JOB_ID))
    flow_url = clean(params.get(FORM_FLOW_URL))

    if job_id:
        return JobResultResponse.model_validate(service.get_job(job_id))
    if flow_url:
        return _serialize(service.flow_jobs(flow_url))
    return _serialize(service.rest_search(params))


@router.get("/compare", response_model=CompareResponse)
def compare(
    flowurl1: Optional[str] = Query(None, alias=COMPARE_FLOW_URL1),
    flowurl2: Optional[str] = Query(None, alias=COMPARE_FLOW_URL2),
    service: JobResultService = Depends(get_job_result_service),
) -> CompareResponse:
    flowurl1, flowurl2 = clean(flowurl1), clean(flowurl2)
    comparison = service.compare(flowurl1, flowurl2)
    return CompareResponse(
        flowurl1=flowurl1,
        flowurl2=flowurl2,
        jobs={
            key or "": FlowPairResponse(first=_serialize(pair.first), second=_serialize(pair.second))
            for key, pair in comparison.items()
        },
    )
