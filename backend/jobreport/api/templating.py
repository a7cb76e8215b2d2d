"""Jinja2 environment shared by the page endpoints and the help page loader."""

from datetime import datetime
from typing import Optional

from fastapi.templating import Jinja2Templates

from jobreport.core.config import settings
from jobreport.domain.severity import Severity


def format_time(value: Optional[datetime]) -> str:
    if value is None:
        return ""
    return value.strftime("%m/%d/%Y %H:%M:%S")


def severity_class(value: int) -> str:
    """CSS class used to colour a row by severity."""
    return f"severity-{Severity.label_for(value).lower()}"


templates = Jinja2Templates(directory=settings.templates_dir)
templates.env.filters["format_time"] = format_time
templates.env.filters["severity_label"] = Severity.label_for
templates.env.filters["severity_class"] = severity_class
templates.env.globals["severities"] = list(Severity)
