"""Tests for heuristic help page loading."""

import pytest
from jinja2 import DictLoader, Environment

from jobreport.api.templating import templates
from jobreport.core.config import settings
from jobreport.domain.exceptions import HelpPageLoadError
from jobreport.services import HelpPageRegistry


def _write_config(tmp_path, body):
    path = tmp_path / "heuristics.yaml"
    path.write_text(body, encoding="utf-8")
    return path


def test_bundled_help_pages_load():
    registry = HelpPageRegistry(templates.env, settings.heuristics_config_path).load()
    assert "Mapper GC" in registry.topics
    assert "garbage collection" in registry.get("Mapper GC")


def test_unknown_or_missing_topic():
    registry = HelpPageRegistry(templates.env, settings.heuristics_config_path).load()
    assert registry.get("No Such Heuristic") is None
    assert registry.get(None) is None
    assert registry.get("") is None


def test_pages_render_from_configured_templates(tmp_path):
    env = Environment(loader=DictLoader({"help/a.html": "<p>About A</p>"}))
    config = _write_config(
        tmp_path, "heuristics:\n  - heuristic_name: A\n    view_name: help/a.html\n"
    )
    registry = HelpPageRegistry(env, config).load()
    assert registry.get("A") == "<p>About A</p>"


def test_missing_template_is_fatal(tmp_path):
    env = Environment(loader=DictLoader({}))
    config = _write_config(
        tmp_path, "heuristics:\n  - heuristic_name: A\n    view_name: help/missing.html\n"
    )
    with pytest.raises(HelpPageLoadError, match="is not a valid view"):
        HelpPageRegistry(env, config).load()


def test_broken_template_is_fatal(tmp_path):
    env = Environment(loader=DictLoader({"help/a.html": "{{ undefined_call() }}"}))
    config = _write_config(
        tmp_path, "heuristics:\n  - heuristic_name: A\n    view_name: help/a.html\n"
    )
    with pytest.raises(HelpPageLoadError):
        HelpPageRegistry(env, config).load()


def test_missing_config_is_fatal(tmp_path):
    with pytest.raises(HelpPageLoadError, match="Could not read"):
        HelpPageRegistry(Environment(), tmp_path / "absent.yaml").load()


def test_malformed_entry_is_fatal(tmp_path):
    config = _write_config(tmp_path, "heuristics:\n  - view_name: help/a.html\n")
    with pytest.raises(HelpPageLoadError, match="Invalid heuristic entry"):
        HelpPageRegistry(Environment(), config).load()
