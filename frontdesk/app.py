"""Application wiring: settings, logging, store, services and screens."""

import logging
from datetime import date
from typing import Callable, Dict, Optional, Sequence, Tuple

from .core.config import Settings, settings as default_settings
from .core.exceptions import NotFoundError
from .core.observability import get_logger, setup_structured_logging
from .editing.person_editor import PersonEditor, ProfileEditor
from .projections.bookings import stay_row_id
from .services import BookingService, EntityStore, ProjectionService, RoleService, RoomService
from .seed import seed_store
from .views import screens
from .views.navigation import NavigationState, Navigator
from .views.notifications import Notifier
from .views.pipeline import ScreenConfig
from .views.screen import ListScreen
from .workers.timers import AsyncioScheduler, Scheduler


class FrontDeskApp:
    """The wired-up core: one store, its services and the screen factory."""

    def __init__(self, settings: Settings, store: EntityStore, scheduler: Scheduler):
        self.settings = settings
        self.store = store
        self.scheduler = scheduler
        self.navigator = Navigator()
        self.projections = ProjectionService(store)
        self.bookings = BookingService(store, self.navigator)
        self.rooms = RoomService(store)
        self.roles = RoleService(store)

    def _screen_sources(self) -> Dict[str, Tuple[ScreenConfig, Callable[[], Sequence]]]:
        s = self.settings
        p = self.projections
        return {
            screens.BOOKINGS: (screens.bookings_screen(s.default_page_size), p.booking_rows),
            screens.CUSTOMERS: (screens.customers_screen(s.directory_page_size), p.unique_customers),
            screens.ROOMS: (screens.rooms_screen(s.directory_page_size), p.room_rows),
            screens.GOVERNMENT_REPORT: (screens.government_report_screen(s.default_page_size), p.report_rows),
            screens.TM30: (screens.tm30_screen(s.default_page_size), p.tm30_rows),
            screens.USERS: (screens.users_screen(s.default_page_size), p.user_rows),
        }

    def open_screen(self, name: str) -> ListScreen:
        """
        Mount a list screen and apply any navigation waiting for it.

        Raises:
            KeyError: If no screen has that name
        """
        config, source = self._screen_sources()[name]
        screen = ListScreen(
            config,
            source,
            self.scheduler,
            highlight_seconds=self.settings.highlight_window_seconds,
            page_button_window=self.settings.page_button_window,
            notifier=Notifier(self.scheduler, self.settings.notification_seconds),
        )
        screen.consume_navigation(self.navigator)
        return screen

    # -- cross-screen links ----------------------------------------------------

    def show_room(self, room_code: str) -> NavigationState:
        """
        Point the rooms screen at a room, as from a booking's room number.

        Raises:
            NotFoundError: If no room has that code
        """
        if not self.store.has_room_code(room_code):
            raise NotFoundError("room", room_code)
        return self.navigator.navigate(screens.ROOMS, room_code)

    def show_customer(self, email: str) -> NavigationState:
        """
        Point the customers screen at the person behind a booking or room guest.

        Raises:
            NotFoundError: If no booking uses that email
        """
        if not email or not any(c.email == email for c in self.store.customers):
            raise NotFoundError("customer", email)
        return self.navigator.navigate(screens.CUSTOMERS, email)

    def open_booking(self, booking_id: str) -> PersonEditor:
        """
        Open a booking from its reference, as the dashboard does.

        The bookings screen is pointed at the booking's first stay and the
        details editor for the booking is returned.

        Raises:
            NotFoundError: If no booking has that reference
        """
        booking = self.store.booking_by_booking_id(booking_id)
        if booking is None:
            raise NotFoundError("booking", booking_id)
        if booking.room_stays:
            self.navigator.navigate(screens.BOOKINGS, stay_row_id(booking.id, booking.room_stays[0].room_number))
        return self.booking_editor(booking.id)

    def booking_editor(self, customer_id: str) -> PersonEditor:
        return PersonEditor(self.store, customer_id)

    def profile_editor(self, email: str) -> ProfileEditor:
        return ProfileEditor(self.store, email)

    def dashboard(self, today: Optional[date] = None):
        return self.projections.dashboard(today or date.today(), self.settings.dashboard_recent_limit)


def create_app(
    settings: Optional[Settings] = None,
    scheduler: Optional[Scheduler] = None,
    today: Optional[date] = None,
) -> FrontDeskApp:
    """
    Create and configure the front-desk core.

    Args:
        settings: Settings to use, defaults to the environment-derived settings
        scheduler: Timer scheduler, defaults to the running asyncio loop
        today: Anchor date for the demo dataset

    Returns:
        Configured application
    """
    settings = settings or default_settings

    setup_structured_logging()
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    store = EntityStore()
    if settings.seed_demo_data:
        seed_store(store, today)

    app = FrontDeskApp(settings, store, scheduler or AsyncioScheduler())
    get_logger(__name__).with_context(environment=settings.environment).info(
        "Front desk core ready",
        seeded=settings.seed_demo_data,
        rooms=len(store.rooms),
        bookings=len(store.customers),
    )
    return app
