"""Filter, search, date range, sort and paginate pipeline shared by every list screen."""

import math
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Sequence, Tuple, TypeVar

from ..core.formatting import to_date
from ..projections.reports import in_date_range
from ..schemas.common import Page

T = TypeVar("T")

ALL = "All"


@dataclass(frozen=True)
class FilterSpec(Generic[T]):
    """A category filter. The `default` value and `ALL` leave rows unfiltered."""

    predicate: Callable[[T, str], bool]
    default: str = ALL
    options: Tuple[str, ...] = ()

    def is_active(self, value: Optional[str]) -> bool:
        return value not in (None, "", ALL)


@dataclass(frozen=True)
class ScreenConfig(Generic[T]):
    """Per-screen pipeline configuration."""

    name: str
    key: Callable[[T], str]
    page_size: int
    filters: Mapping[str, FilterSpec] = field(default_factory=dict)
    search_fields: Tuple[Callable[[T], str], ...] = ()
    date_field: Optional[Callable[[T], Any]] = None
    sort_key: Optional[Callable[[T], Any]] = None
    sort_descending: bool = False

    def default_filters(self) -> Dict[str, str]:
        return {name: spec.default for name, spec in self.filters.items()}


@dataclass
class ListQuery:
    """Live query state of one list screen."""

    filters: Dict[str, str] = field(default_factory=dict)
    search: str = ""
    start: Optional[date] = None
    end: Optional[date] = None
    page: int = 1
    page_size: int = 10


def page_window(current: int, total: int, max_buttons: int = 5) -> List[int]:
    """
    Page numbers to show as buttons, centred on the current page.

    Args:
        current: 1-based current page
        total: Total number of pages
        max_buttons: Maximum buttons shown at once

    Returns:
        Consecutive page numbers, at most `max_buttons` of them
    """
    if total <= max_buttons:
        return list(range(1, total + 1))

    before = max_buttons // 2
    after = math.ceil(max_buttons / 2) - 1
    if current <= before:
        start, end = 1, max_buttons
    elif current + after >= total:
        start, end = total - max_buttons + 1, total
    else:
        start, end = current - before, current + after
    return list(range(start, end + 1))


class ListViewPipeline(Generic[T]):
    """
    Applies a screen's configuration to a row list.

    Steps run in a fixed order: category filters, free-text search, inclusive
    date range, stable sort, then 1-based pagination.
    """

    def __init__(self, config: ScreenConfig[T], page_button_window: int = 5):
        self.config = config
        self.page_button_window = page_button_window

    def _matches_filters(self, row: T, filters: Mapping[str, str]) -> bool:
        for name, spec in self.config.filters.items():
            value = filters.get(name, spec.default)
            if spec.is_active(value) and not spec.predicate(row, value):
                return False
        return True

    def _matches_search(self, row: T, needle: str) -> bool:
        return any(needle in (getter(row) or "").lower() for getter in self.config.search_fields)

    def filtered(self, rows: Sequence[T], query: ListQuery) -> List[T]:
        """Every row that survives the query, in display order, before pagination."""
        result = [row for row in rows if self._matches_filters(row, query.filters)]

        needle = query.search.strip().lower()
        if needle and self.config.search_fields:
            result = [row for row in result if self._matches_search(row, needle)]

        if self.config.date_field is not None and (query.start or query.end):
            result = [
                row for row in result
                if in_date_range(to_date(self.config.date_field(row)), query.start, query.end)
            ]

        if self.config.sort_key is not None:
            result = sorted(result, key=self.config.sort_key, reverse=self.config.sort_descending)
        return result

    def paginate(self, rows: Sequence[T], page: int, page_size: int) -> Page:
        total_pages = math.ceil(len(rows) / page_size) if rows else 0
        page = max(1, min(page, total_pages or 1))
        offset = (page - 1) * page_size
        return Page(
            items=list(rows[offset:offset + page_size]),
            page=page,
            page_size=page_size,
            total_items=len(rows),
            total_pages=total_pages,
            page_numbers=page_window(page, total_pages, self.page_button_window),
        )

    def run(self, rows: Sequence[T], query: ListQuery) -> Page:
        return self.paginate(self.filtered(rows, query), query.page, query.page_size)

    def locate(self, rows: Sequence[T], query: ListQuery, key: str) -> Optional[int]:
        """Page holding the row with `key` in the filtered list, or None if it is filtered out."""
        for index, row in enumerate(self.filtered(rows, query)):
            if self.config.key(row) == key:
                return math.ceil((index + 1) / query.page_size)
        return None
