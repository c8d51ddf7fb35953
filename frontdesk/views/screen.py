"""Live state of one list screen, including navigate-and-highlight."""

import logging
from datetime import date
from typing import Callable, Generic, Optional, Sequence

from ..schemas.common import Page
from ..workers.timers import Scheduler, TimerSlot
from .navigation import NavigationState, Navigator
from .notifications import Notifier
from .pipeline import ListQuery, ListViewPipeline, ScreenConfig, T

logger = logging.getLogger(__name__)


class ListScreen(Generic[T]):
    """
    One mounted list screen.

    Rows are pulled from `source` on every render, so the screen always
    reflects the current store. Any change to filters, search, date range
    or page size goes back to page 1.
    """

    def __init__(
        self,
        config: ScreenConfig[T],
        source: Callable[[], Sequence[T]],
        scheduler: Scheduler,
        *,
        highlight_seconds: float = 3.0,
        page_button_window: int = 5,
        notifier: Optional[Notifier] = None,
    ):
        self.config = config
        self.source = source
        self.pipeline = ListViewPipeline(config, page_button_window=page_button_window)
        self.query = ListQuery(filters=config.default_filters(), page_size=config.page_size)
        self.highlight_seconds = highlight_seconds
        self.notifier = notifier
        self.highlighted_key: Optional[str] = None
        self._highlight_timer = TimerSlot(scheduler, name=f"{config.name}.highlight")
        self._closed = False

    @property
    def name(self) -> str:
        return self.config.name

    # -- query state -----------------------------------------------------------

    def set_filter(self, name: str, value: str) -> None:
        if name not in self.config.filters:
            raise KeyError(f"Screen {self.name} has no filter named {name}")
        self.query.filters[name] = value
        self.query.page = 1

    def set_search(self, text: str) -> None:
        self.query.search = text
        self.query.page = 1

    def set_date_range(self, start: Optional[date] = None, end: Optional[date] = None) -> None:
        self.query.start = start
        self.query.end = end
        self.query.page = 1

    def set_page_size(self, page_size: int) -> None:
        if page_size < 1:
            raise ValueError("page_size must be positive")
        self.query.page_size = page_size
        self.query.page = 1

    def go_to_page(self, page: int) -> bool:
        """Switch page; pages outside 1..total_pages are ignored."""
        total_pages = self.render().total_pages
        if 1 <= page <= total_pages:
            self.query.page = page
            return True
        return False

    # -- rendering -------------------------------------------------------------

    def filtered_rows(self) -> list:
        return self.pipeline.filtered(self.source(), self.query)

    def render(self) -> Page:
        """Current page. A highlight whose row has gone is cleared with its timer."""
        rows = self.filtered_rows()
        if self.highlighted_key is not None:
            if not any(self.config.key(row) == self.highlighted_key for row in rows):
                logger.debug(
                    "Highlighted row no longer listed",
                    extra={"screen": self.name, "highlight": self.highlighted_key},
                )
                self.clear_highlight()
        page = self.pipeline.paginate(rows, self.query.page, self.query.page_size)
        self.query.page = page.page
        return page

    def is_highlighted(self, row: T) -> bool:
        return self.highlighted_key is not None and self.config.key(row) == self.highlighted_key

    # -- navigate and highlight ------------------------------------------------

    def receive_navigation(self, state: Optional[NavigationState]) -> bool:
        """
        Show and flag the target row of an inbound navigation.

        The row is looked up in this screen's own filtered, sorted list. A
        target that is not listed changes nothing.

        Returns:
            True if the row was found and highlighted
        """
        if state is None or self._closed:
            return False
        if state.message and self.notifier is not None:
            self.notifier.success(state.message)

        page = self.pipeline.locate(self.source(), self.query, state.highlight)
        if page is None:
            logger.info(
                "Highlight target not listed",
                extra={"screen": self.name, "highlight": state.highlight},
            )
            return False

        self.query.page = page
        self.highlighted_key = state.highlight
        self._highlight_timer.start(self.highlight_seconds, self._expire_highlight)
        return True

    def consume_navigation(self, navigator: Navigator) -> bool:
        """Take this screen's pending navigation, if any, and apply it."""
        return self.receive_navigation(navigator.take(self.name))

    def clear_highlight(self) -> None:
        self._highlight_timer.cancel()
        self.highlighted_key = None

    def _expire_highlight(self) -> None:
        self.highlighted_key = None

    def close(self) -> None:
        """Unmount: cancel every pending timer this screen owns."""
        self._closed = True
        self.clear_highlight()
        if self.notifier is not None:
            self.notifier.dismiss()
