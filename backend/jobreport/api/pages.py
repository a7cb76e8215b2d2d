"""Server-rendered HTML pages."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import HTMLResponse

from jobreport.api.templating import templates
from jobreport.core.logging import LoggerAdapter, get_logger
from jobreport.dependencies import (
    get_dashboard_service,
    get_help_registry,
    get_job_result_service,
)
from jobreport.domain.exceptions import DomainError, NotFoundError
from jobreport.domain.grouping import GroupBy, group_jobs
from jobreport.domain.search import (
    COMPARE_FLOW_URL1,
    COMPARE_FLOW_URL2,
    FORM_FLOW_URL,
    FORM_JOB_ID,
    clean,
)
from jobreport.services import DashboardService, HelpPageRegistry, JobResultService
from jobreport.services.job_result_service import require_param

router = APIRouter(tags=["pages"], default_response_class=HTMLResponse)

logger = get_logger(__name__)


def _request_logger(request: Request) -> LoggerAdapter:
    return LoggerAdapter(logger, {"endpoint": request.url.path, "query": str(request.query_params)})


def _error_page(request: Request, exc: DomainError) -> HTMLResponse:
    status_code = (
        status.HTTP_404_NOT_FOUND if isinstance(exc, NotFoundError) else status.HTTP_400_BAD_REQUEST
    )
    _request_logger(request).warning("%s", exc.message, extra={"status_code": status_code})
    return templates.TemplateResponse(
        request,
        "page/error.html",
        {"message": exc.message, "status_code": status_code},
        status_code=status_code,
    )


def _search_page(request: Request, content: str, status_code: int = 200, **context):
    return templates.TemplateResponse(
        request,
        "page/search.html",
        {"content_template": content, "pagination": None, **context},
        status_code=status_code,
    )


@router.get("/")
def dashboard(
    request: Request,
    service: DashboardService = Depends(get_dashboard_service),
):
    """Summary counts for the last day and the latest analysed jobs."""
    stats = service.stats()
    return templates.TemplateResponse(
        request,
        "page/home.html",
        {
            "stats": stats,
            "title": "Latest analysis",
            "results": service.latest(),
        },
    )


@router.get("/search")
def search(
    request: Request,
    service: JobResultService = Depends(get_job_result_service),
):
    """Show one job, one flow execution, or a filtered and paginated listing."""
    params = request.query_params
    job_id = clean(params.get(FORM_JOB_ID))
    flow_url = clean(params.get(FORM_FLOW_URL))

    if job_id:
        try:
            result = service.get_job(job_id)
        except NotFoundError:
            _request_logger(request).info("No job result for job id %s", job_id)
            return _search_page(
                request,
                "results/job_details.html",
                status_code=status.HTTP_404_NOT_FOUND,
                result=None,
            )
        return _search_page(request, "results/job_details.html", result=result)

    if flow_url:
        grouped = group_jobs(service.flow_jobs(flow_url), GroupBy.JOB_EXECUTION_URL)
        return _search_page(
            request, "results/flow_details.html", execution_url=flow_url, grouped=grouped
        )

    page = service.search_page(params)
    if page.is_empty:
        return _search_page(request, "results/job_details.html", result=None)
    return _search_page(
        request,
        "results/search_results.html",
        pagination=page.pagination,
        title="Results",
        results=page.results,
    )


@router.get("/compare")
def compare(
    request: Request,
    flowurl1: Optional[str] = Query(None, alias=COMPARE_FLOW_URL1),
    flowurl2: Optional[str] = Query(None, alias=COMPARE_FLOW_URL2),
    service: JobResultService = Depends(get_job_result_service),
):
    """Side-by-side comparison of two flow executions."""
    flowurl1, flowurl2 = clean(flowurl1), clean(flowurl2)
    return templates.TemplateResponse(
        request,
        "page/compare.html",
        {
            "title": "Comparison Results",
            "flowurl1": flowurl1,
            "flowurl2": flowurl2,
            "comparison": service.compare(flowurl1, flowurl2),
        },
    )


@router.get("/help")
def help_page(
    request: Request,
    topic: Optional[str] = Query(None),
    registry: HelpPageRegistry = Depends(get_help_registry),
):
    page = registry.get(topic)
    return templates.TemplateResponse(
        request,
        "page/help.html",
        {
            "title": topic if page is not None else "Help",
            "page": page,
            "topics": registry.topics,
        },
    )


@router.get("/allexecs")
def all_job_execs(
    request: Request,
    job: Optional[str] = Query(None),
    service: JobResultService = Depends(get_job_result_service),
):
    """Historic executions of the same job definition."""
    try:
        job_url = require_param(job, "No job definition url provided.")
        grouped = service.other_executions(job_url)
    except DomainError as exc:
        return _error_page(request, exc)
    return _search_page(
        request, "results/flow_details.html", execution_url=job_url, grouped=grouped
    )


@router.get("/flowrelated")
def flow_related(
    request: Request,
    flowexec: Optional[str] = Query(None),
    service: JobResultService = Depends(get_job_result_service),
):
    """All jobs found in the same flow execution."""
    try:
        flow_exec_url = require_param(flowexec, "No flow exec url provided.")
        grouped = service.flow_jobs_grouped(flow_exec_url)
    except DomainError as exc:
        return _error_page(request, exc)
    return _search_page(
        request, "results/flow_details.html", execution_url=flow_exec_url, grouped=grouped
    )
