"""Room occupancy index, room rows and availability."""

from datetime import date
from typing import Dict, Iterable, List, Mapping, Optional, Set

from ..core.formatting import natural_key, parse_floor_number
from ..models.booking import BookingStatus, Customer
from ..models.room import Room, RoomStatus
from ..schemas.room import RoomRow

UNKNOWN_ROOM = "Unknown room"


def occupancy_index(customers: Iterable[Customer]) -> Dict[str, Customer]:
    """
    Map room code to the booking currently checked into it.

    Only checked-in stays count. If two bookings claim the same room the
    later one in store order wins.
    """
    index: Dict[str, Customer] = {}
    for customer in customers:
        for stay in customer.room_stays:
            if stay.booking_status == BookingStatus.CHECKED_IN and stay.room_number:
                index[stay.room_number] = customer
    return index


def room_rows(rooms: Iterable[Room], customers: Iterable[Customer]) -> List[RoomRow]:
    """Rooms joined with their live guest from the occupancy index."""
    index = occupancy_index(customers)
    return [RoomRow(room=room, current_guest=index.get(room.room_code)) for room in rooms]


def describe_room_code(rooms_by_code: Mapping[str, Room], room_code: str) -> str:
    """Display label for a stay's room code; dangling codes render as unknown."""
    room = rooms_by_code.get(room_code)
    if room is None:
        return UNKNOWN_ROOM
    return f"{room.room_code} ({room.type.value})"


def _overlaps(customer: Customer, check_in: Optional[date], check_out: Optional[date]) -> bool:
    if check_in is None or check_out is None:
        return True
    # Half-open windows: checking out on a day frees the room for that day's arrival
    return customer.check_in_date < check_out and check_in < customer.check_out_date


def claimed_room_codes(
    customers: Iterable[Customer],
    *,
    check_in: Optional[date] = None,
    check_out: Optional[date] = None,
    editing_customer_id: Optional[str] = None,
) -> Set[str]:
    """Room codes held by confirmed or checked-in stays of other bookings."""
    claimed: Set[str] = set()
    for customer in customers:
        if customer.id == editing_customer_id:
            continue
        if not _overlaps(customer, check_in, check_out):
            continue
        claimed.update(stay.room_number for stay in customer.room_stays if stay.is_active)
    return claimed


def available_rooms(
    rooms: Iterable[Room],
    customers: Iterable[Customer],
    *,
    check_in: Optional[date] = None,
    check_out: Optional[date] = None,
    editing_customer_id: Optional[str] = None,
) -> List[Room]:
    """
    Rooms a booking may be given.

    Args:
        rooms: Every room in the store
        customers: Every booking in the store
        check_in: Requested arrival; with `check_out`, only overlapping claims block
        check_out: Requested departure
        editing_customer_id: Booking being edited; its own rooms stay selectable

    Returns:
        Candidate rooms in natural room-code order
    """
    customers = list(customers)
    own: Set[str] = set()
    if editing_customer_id is not None:
        for customer in customers:
            if customer.id == editing_customer_id:
                own.update(customer.room_numbers)

    claimed = claimed_room_codes(
        customers,
        check_in=check_in,
        check_out=check_out,
        editing_customer_id=editing_customer_id,
    )
    candidates = [
        room
        for room in rooms
        if (room.status == RoomStatus.AVAILABLE or room.room_code in own)
        and room.room_code not in claimed
    ]
    return sorted(candidates, key=lambda room: natural_key(room.room_code))


def floor_options(rooms: Iterable[Room]) -> List[str]:
    """Distinct floor labels ordered by floor number."""
    floors = {room.floor for room in rooms if room.floor}
    return sorted(floors, key=lambda f: (parse_floor_number(f) is None, parse_floor_number(f) or 0, f))


def room_type_options(rooms: Iterable[Room]) -> List[str]:
    """Distinct room types in first-seen order."""
    return list(dict.fromkeys(room.type.value for room in rooms))
