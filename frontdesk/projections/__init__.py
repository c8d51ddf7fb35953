"""Pure derivations over the entity store collections."""

from .bookings import (
    RegistrationState,
    booking_for_row,
    displayed_registration_state,
    flatten_room_stays,
    is_person_complete,
    is_registration_complete,
    stay_row_id,
)
from .customers import booking_history, total_bookings, unique_customers
from .dashboard import dashboard_stats
from .reports import in_date_range, report_rows, tm30_rows
from .rooms import (
    UNKNOWN_ROOM,
    available_rooms,
    claimed_room_codes,
    describe_room_code,
    floor_options,
    occupancy_index,
    room_rows,
    room_type_options,
)
from .users import user_rows, users_not_in_role

__all__ = [
    "RegistrationState",
    "UNKNOWN_ROOM",
    "available_rooms",
    "booking_for_row",
    "booking_history",
    "claimed_room_codes",
    "dashboard_stats",
    "describe_room_code",
    "displayed_registration_state",
    "floor_options",
    "flatten_room_stays",
    "in_date_range",
    "is_person_complete",
    "is_registration_complete",
    "occupancy_index",
    "report_rows",
    "room_rows",
    "room_type_options",
    "stay_row_id",
    "tm30_rows",
    "total_bookings",
    "unique_customers",
    "user_rows",
    "users_not_in_role",
]
