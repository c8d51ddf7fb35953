"""Dashboard statistics."""

from datetime import date
from typing import Iterable

from ..models.booking import BookingStatus, Customer
from ..models.room import Room, RoomStatus
from ..schemas.dashboard import DashboardStats
from .bookings import flatten_room_stays


def dashboard_stats(
    rooms: Iterable[Room],
    customers: Iterable[Customer],
    today: date,
    recent_limit: int = 5,
) -> DashboardStats:
    """
    Headline counts plus the recent check-in and today's check-out lists.

    Room counts come from `Room.status`; check-in and check-out counts are
    bookings whose stay window starts or ends on `today`.
    """
    rooms = list(rooms)
    customers = list(customers)
    rows = flatten_room_stays(customers)

    recent = sorted(
        (row for row in rows if row.booking_status == BookingStatus.CHECKED_IN),
        key=lambda row: row.check_in_date,
        reverse=True,
    )[:recent_limit]

    return DashboardStats(
        total_rooms=len(rooms),
        available_rooms=sum(1 for r in rooms if r.status == RoomStatus.AVAILABLE),
        booked_rooms=sum(1 for r in rooms if r.status == RoomStatus.OCCUPIED),
        todays_check_ins=sum(1 for c in customers if c.check_in_date == today),
        todays_check_outs=sum(1 for c in customers if c.check_out_date == today),
        recent_check_ins=recent,
        todays_check_out_rows=[row for row in rows if row.check_out_date == today],
    )
