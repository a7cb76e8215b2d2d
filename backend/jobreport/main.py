"""Main FastAPI application."""

import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from jobreport.api import errors, metrics, pages, rest
from jobreport.api.templating import templates
from jobreport.core import settings, setup_logging
from jobreport.core.logging import get_logger
from jobreport.core.metrics import (
    HTTP_REQUEST_DURATION_SECONDS,
    HTTP_REQUESTS_IN_PROGRESS,
    HTTP_REQUESTS_TOTAL,
    normalize_endpoint,
    set_app_info,
)
from jobreport.db import SessionLocal
from jobreport.domain.exceptions import DomainError
from jobreport.services import HelpPageRegistry

setup_logging()
logger = get_logger(__name__)

app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
)

set_app_info(version=settings.api_version, environment=settings.environment)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.middleware("http")
async def prometheus_metrics_middleware(request: Request, call_next):
    """Collect Prometheus metrics for all HTTP requests."""
    if request.url.path == "/metrics":
        return await call_next(request)

    method = request.method
    endpoint = normalize_endpoint(request.url.path)

    HTTP_REQUESTS_IN_PROGRESS.labels(method=method, endpoint=endpoint).inc()
    start_time = time.perf_counter()

    try:
        response = await call_next(request)
        status_code = str(response.status_code)
    except Exception:
        status_code = "500"
        raise
    finally:
        duration = time.perf_counter() - start_time
        HTTP_REQUESTS_IN_PROGRESS.labels(method=method, endpoint=endpoint).dec()
        HTTP_REQUEST_DURATION_SECONDS.labels(method=method, endpoint=endpoint).observe(duration)
        HTTP_REQUESTS_TOTAL.labels(method=method, endpoint=endpoint, status_code=status_code).inc()

    return response


app.include_router(metrics.router)
app.include_router(pages.router)
app.include_router(rest.router)


@app.on_event("startup")
def load_help_pages() -> None:
    """Render the heuristic help pages; a broken page aborts startup."""
    try:
        app.state.help_pages = HelpPageRegistry(
            templates.env, settings.heuristics_config_path
        ).load()
    except Exception:
        logger.error("Error loading pluggable heuristics help pages.", exc_info=True)
        raise


@app.get("/health")
async def health() -> dict:
    """Basic health check endpoint (alias for /health/live)."""
    return {"status": "healthy"}


@app.get("/health/live")
async def health_live() -> dict:
    """Liveness probe endpoint.

    Returns 200 if the application is running.
    """
    return {"status": "healthy"}


@app.get("/health/ready")
def health_ready():
    """Readiness check: the result database must answer ``SELECT 1``."""
    try:
        db = SessionLocal()
        try:
            db.execute(text("SELECT 1"))
        finally:
            db.close()
    except Exception as e:
        return JSONResponse(
            status_code=503,
            content={
                "status": "unhealthy",
                "dependencies": {"database": {"status": "unhealthy", "error": str(e)}},
            },
        )
    return {"status": "healthy", "dependencies": {"database": {"status": "healthy"}}}


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError):
    """Translate domain errors to HTTP responses globally."""
    http_exc = errors.to_http(exc)
    return JSONResponse(
        status_code=http_exc.status_code,
        content={"detail": http_exc.detail},
    )
