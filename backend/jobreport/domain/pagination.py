"""Page window arithmetic for the search page."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Optional, TypeVar
from urllib.parse import urlencode

from jobreport.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

PAGE_PARAM = "page"
# Larger page numbers are treated as unparseable; their offsets overflow SQL integers.
MAX_PAGE = 2**31 - 1


@dataclass
class PaginationStats:
    """Visible page window and page-bar bounds for one request.

    The page bar shows up to ``page_bar_length`` page links centred on the
    current page. Only the rows covered by the bar are fetched, plus one
    row so the last page link is known to exist.
    """

    page_length: int
    page_bar_length: int
    current_page: int = 1
    pagination_bar_end_index: int = 1
    query_string: Optional[str] = None

    def set_current_page(self, page: int) -> None:
        self.current_page = page if page > 0 else 1

    def set_current_page_from(self, raw: Optional[str]) -> None:
        """Parse the ``page`` parameter, falling back to page 1."""
        if raw is None:
            self.set_current_page(1)
            return
        try:
            page = int(raw)
        except ValueError:
            page = None
        if page is None or page > MAX_PAGE:
            logger.error("Error parsing page number. Setting current page to 1.")
            page = 1
        self.set_current_page(page)

    @property
    def pagination_bar_start_index(self) -> int:
        return max(self.current_page - self.page_bar_length // 2, 1)

    @property
    def fetch_offset(self) -> int:
        return (self.pagination_bar_start_index - 1) * self.page_length

    @property
    def fetch_limit(self) -> int:
        return (self.page_bar_length - 1) * self.page_length + 1

    def compute_pagination_bar_end_index(self, result_size: int) -> int:
        self.pagination_bar_end_index = (
            self.pagination_bar_start_index + (result_size - 1) // self.page_length
        )
        return self.pagination_bar_end_index

    def is_out_of_range(self, result_size: int) -> bool:
        return result_size == 0 or self.current_page > self.compute_pagination_bar_end_index(
            result_size
        )

    def page_slice(self, fetched: Sequence[T]) -> list[T]:
        """Cut the current page out of the rows fetched for the whole bar."""
        start = (self.current_page - self.pagination_bar_start_index) * self.page_length
        end = min(len(fetched), start + self.page_length)
        return list(fetched[start:end])

    def page_range(self) -> range:
        return range(self.pagination_bar_start_index, self.pagination_bar_end_index + 1)

    def set_query_string(self, params: Mapping[str, str]) -> None:
        """Remember the request parameters except ``page`` for building page links."""
        items = params.multi_items() if hasattr(params, "multi_items") else params.items()
        fields = [(key, value) for key, value in items if key != PAGE_PARAM]
        self.query_string = urlencode(fields) if fields else None

    def page_url(self, path: str, page: int) -> str:
        prefix = f"{self.query_string}&" if self.query_string else ""
        return f"{path}?{prefix}{PAGE_PARAM}={page}"
