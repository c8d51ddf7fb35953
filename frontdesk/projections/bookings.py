"""Booking-per-room-stay flattening and registration completeness."""

from enum import Enum
from typing import Iterable, List, Optional, Union

from ..models.booking import BookingStatus, Customer, Guest
from ..schemas.booking import BookingRow

UNASSIGNED = "unassigned"


class RegistrationState(str, Enum):
    """Registration indicator shown next to a booking row."""
    COMPLETE = "complete"
    INCOMPLETE = "incomplete"
    NONE = "none"


def stay_row_id(customer_id: str, room_number: str) -> str:
    return f"{customer_id}-{room_number or UNASSIGNED}"


def flatten_room_stays(customers: Iterable[Customer]) -> List[BookingRow]:
    """One row per room stay, in booking order then stay order."""
    return [
        BookingRow(
            row_id=stay_row_id(customer.id, stay.room_number),
            customer=customer,
            room_number=stay.room_number,
            booking_status=stay.booking_status,
        )
        for customer in customers
        for stay in customer.room_stays
    ]


def booking_for_row(customers: Iterable[Customer], row_id: str) -> Optional[Customer]:
    """Resolve a flattened row id back to its booking."""
    for customer in customers:
        for stay in customer.room_stays:
            if stay_row_id(customer.id, stay.room_number) == row_id:
                return customer
    return None


def is_person_complete(person: Union[Customer, Guest]) -> bool:
    """A person is registered once passport, occupation and address are filled in."""
    return all(
        (value or "").strip()
        for value in (person.passport_id, person.occupation, person.current_address)
    )


def is_registration_complete(customer: Customer) -> bool:
    return is_person_complete(customer) and all(is_person_complete(g) for g in customer.guest_list)


def displayed_registration_state(customer: Customer, booking_status: BookingStatus) -> RegistrationState:
    """
    Registration indicator for one stay.

    Checked-in and checked-out stays always show as complete; cancelled stays
    show nothing; pending and confirmed stays show the computed result.
    """
    if booking_status == BookingStatus.CANCELLED:
        return RegistrationState.NONE
    if booking_status in (BookingStatus.CHECKED_IN, BookingStatus.CHECKED_OUT):
        return RegistrationState.COMPLETE
    if is_registration_complete(customer):
        return RegistrationState.COMPLETE
    return RegistrationState.INCOMPLETE
