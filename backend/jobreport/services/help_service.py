"""Heuristic help pages, rendered once at startup."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from jinja2 import Environment, TemplateError
from markupsafe import Markup

from jobreport.core.logging import get_logger
from jobreport.domain.exceptions import HelpPageLoadError

logger = get_logger(__name__)


class HelpPageRegistry:
    """Maps heuristic names to their pre-rendered help page HTML."""

    def __init__(self, env: Environment, config_path: str | Path) -> None:
        self.env = env
        self.config_path = Path(config_path)
        self._pages: dict[str, Markup] = {}

    def _read_config(self) -> list[dict]:
        try:
            with self.config_path.open(encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise HelpPageLoadError(
                f"Could not read heuristics configuration {self.config_path}"
            ) from exc

        heuristics = data.get("heuristics", []) if isinstance(data, dict) else None
        if not isinstance(heuristics, list):
            raise HelpPageLoadError(
                f"{self.config_path} must contain a 'heuristics' list"
            )
        return heuristics

    def load(self) -> "HelpPageRegistry":
        """Render every configured help view; any failure is fatal."""
        logger.info("Loading help pages for pluggable heuristics")
        pages: dict[str, Markup] = {}
        for entry in self._read_config():
            try:
                name = entry["heuristic_name"]
                view_name = entry["view_name"]
            except (KeyError, TypeError) as exc:
                raise HelpPageLoadError(f"Invalid heuristic entry: {entry!r}") from exc

            logger.info("Loading help page %s", view_name)
            try:
                template = self.env.get_template(view_name)
                pages[name] = Markup(template.render())
            except TemplateError as exc:
                raise HelpPageLoadError(f"{view_name} is not a valid view.") from exc

        self._pages = pages
        return self

    def get(self, topic: Optional[str]) -> Optional[Markup]:
        if not topic:
            return None
        return self._pages.get(topic)

    @property
    def topics(self) -> list[str]:
        return sorted(self._pages)
