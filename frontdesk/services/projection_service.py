"""Projections over the store, memoised on the store revision."""

import logging
from datetime import date
from typing import Any, Callable, Dict, Hashable, List, Optional, Tuple

from ..models.booking import Customer
from ..models.room import Room
from ..projections import (
    available_rooms,
    dashboard_stats,
    describe_room_code,
    flatten_room_stays,
    occupancy_index,
    report_rows,
    room_rows,
    tm30_rows,
    unique_customers,
    user_rows,
)
from ..schemas.booking import BookingRow
from ..schemas.customer import UniqueCustomer
from ..schemas.dashboard import DashboardStats
from ..schemas.report import ReportRow, TM30Row
from ..schemas.room import RoomRow
from ..schemas.user import UserRow
from .entity_store import EntityStore

logger = logging.getLogger(__name__)


class ProjectionService:
    """
    Read side of the store.

    Each projection is computed at most once per store revision and argument
    set; any mutation invalidates every cached result.
    """

    def __init__(self, store: EntityStore):
        self.store = store
        self._cache: Dict[Hashable, Any] = {}
        self._revision = store.revision

    def _memo(self, key: Tuple[Hashable, ...], compute: Callable[[], Any]) -> Any:
        if self._revision != self.store.revision:
            self._cache.clear()
            self._revision = self.store.revision
        if key not in self._cache:
            self._cache[key] = compute()
        return self._cache[key]

    def booking_rows(self) -> List[BookingRow]:
        return self._memo(("booking_rows",), lambda: flatten_room_stays(self.store.customers))

    def unique_customers(self) -> List[UniqueCustomer]:
        return self._memo(("unique_customers",), lambda: unique_customers(self.store.customers))

    def occupancy(self) -> Dict[str, Customer]:
        return self._memo(("occupancy",), lambda: occupancy_index(self.store.customers))

    def room_rows(self) -> List[RoomRow]:
        return self._memo(("room_rows",), lambda: room_rows(self.store.rooms, self.store.customers))

    def rooms_by_code(self) -> Dict[str, Room]:
        return self._memo(("rooms_by_code",), lambda: {room.room_code: room for room in self.store.rooms})

    def room_label(self, room_code: str) -> str:
        return describe_room_code(self.rooms_by_code(), room_code)

    def available_rooms(
        self,
        check_in: Optional[date] = None,
        check_out: Optional[date] = None,
        editing_customer_id: Optional[str] = None,
    ) -> List[Room]:
        return self._memo(
            ("available_rooms", check_in, check_out, editing_customer_id),
            lambda: available_rooms(
                self.store.rooms,
                self.store.customers,
                check_in=check_in,
                check_out=check_out,
                editing_customer_id=editing_customer_id,
            ),
        )

    def report_rows(self) -> List[ReportRow]:
        return self._memo(("report_rows",), lambda: report_rows(self.store.customers))

    def tm30_rows(self) -> List[TM30Row]:
        return self._memo(("tm30_rows",), lambda: tm30_rows(self.store.customers))

    def user_rows(self) -> List[UserRow]:
        return self._memo(
            ("user_rows",),
            lambda: user_rows(self.store.users, self.store.roles, self.store.role_assignments),
        )

    def dashboard(self, today: date, recent_limit: int = 5) -> DashboardStats:
        return self._memo(
            ("dashboard", today, recent_limit),
            lambda: dashboard_stats(self.store.rooms, self.store.customers, today, recent_limit),
        )
