"""API module initialization."""

from . import metrics, pages, rest

__all__ = ["metrics", "pages", "rest"]
