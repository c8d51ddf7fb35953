"""Pipeline configuration of each list screen."""

from ..core.formatting import natural_key
from ..models.booking import ACTIVE_STAY_STATUSES, BookingStatus
from ..models.room import RoomStatus
from ..models.user import UserStatus
from ..reference.catalog import ROOM_TYPES
from ..schemas.booking import BookingRow
from ..schemas.customer import UniqueCustomer
from ..schemas.report import ReportRow, TM30Row
from ..schemas.room import RoomRow
from ..schemas.user import UserRow
from .pipeline import ALL, FilterSpec, ScreenConfig

BOOKINGS = "bookings"
CUSTOMERS = "customers"
ROOMS = "rooms"
GOVERNMENT_REPORT = "government_report"
TM30 = "tm30"
USERS = "users"

CURRENT_AND_UPCOMING = "Current & Upcoming"
STATUS_FILTER_ORDER = tuple(
    s.value for s in (
        BookingStatus.CONFIRMED,
        BookingStatus.PENDING,
        BookingStatus.CHECKED_IN,
        BookingStatus.CHECKED_OUT,
        BookingStatus.CANCELLED,
    )
)


def _booking_status_matches(row: BookingRow, selected: str) -> bool:
    if selected == CURRENT_AND_UPCOMING:
        return row.booking_status in ACTIVE_STAY_STATUSES
    return row.booking_status.value == selected


def bookings_screen(page_size: int = 10) -> ScreenConfig[BookingRow]:
    """Booking management: one row per room stay, current and upcoming by default."""
    return ScreenConfig(
        name=BOOKINGS,
        key=lambda row: row.row_id,
        page_size=page_size,
        filters={
            "status": FilterSpec(
                predicate=_booking_status_matches,
                default=CURRENT_AND_UPCOMING,
                options=(CURRENT_AND_UPCOMING, ALL) + STATUS_FILTER_ORDER,
            ),
        },
        search_fields=(lambda row: row.full_name,),
        date_field=lambda row: row.check_in_date,
    )


def customers_screen(page_size: int = 20) -> ScreenConfig[UniqueCustomer]:
    return ScreenConfig(
        name=CUSTOMERS,
        key=lambda customer: customer.email,
        page_size=page_size,
        search_fields=(lambda c: c.full_name, lambda c: c.passport_id),
    )


def rooms_screen(page_size: int = 20) -> ScreenConfig[RoomRow]:
    """Room management, keyed and naturally ordered by room code."""
    return ScreenConfig(
        name=ROOMS,
        key=lambda row: row.room_code,
        page_size=page_size,
        filters={
            "floor": FilterSpec(predicate=lambda row, floor: row.room.floor == floor),
            "type": FilterSpec(
                predicate=lambda row, room_type: row.room.type.value == room_type,
                options=(ALL,) + ROOM_TYPES,
            ),
            "status": FilterSpec(
                predicate=lambda row, status: row.room.status.value == status,
                options=(ALL,) + tuple(s.value for s in RoomStatus),
            ),
        },
        search_fields=(lambda row: row.room_code,),
        sort_key=lambda row: natural_key(row.room_code),
    )


def government_report_screen(page_size: int = 10) -> ScreenConfig[ReportRow]:
    return ScreenConfig(
        name=GOVERNMENT_REPORT,
        key=lambda row: row.row_id,
        page_size=page_size,
        search_fields=(lambda row: row.full_name,),
        date_field=lambda row: row.check_in_date,
        sort_key=lambda row: row.check_in_date,
    )


def tm30_screen(page_size: int = 10) -> ScreenConfig[TM30Row]:
    return ScreenConfig(
        name=TM30,
        key=lambda row: row.id,
        page_size=page_size,
        search_fields=(lambda row: row.first_name, lambda row: row.last_name, lambda row: row.passport_id),
        date_field=lambda row: row.check_out_on,
    )


def users_screen(page_size: int = 10) -> ScreenConfig[UserRow]:
    return ScreenConfig(
        name=USERS,
        key=lambda row: row.id,
        page_size=page_size,
        filters={
            "role": FilterSpec(predicate=lambda row, role: row.role_name == role),
            "status": FilterSpec(
                predicate=lambda row, status: row.user.status.value == status,
                options=(ALL,) + tuple(s.value for s in UserStatus),
            ),
        },
        search_fields=(lambda row: row.user.name, lambda row: row.user.email),
    )
