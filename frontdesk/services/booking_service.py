"""Booking service for business logic operations."""

import logging
import math
from datetime import date
from typing import List, Optional, Sequence

from ..core.exceptions import RoomUnavailableError
from ..core.observability import metrics_collector
from ..models.booking import (
    ACTIVE_STAY_STATUSES,
    BookingStatus,
    Customer,
    EmailStatus,
    Gender,
    Guest,
    GuestType,
    RoomStay,
    TM30Status,
)
from ..models.room import Room, RoomStatus
from ..projections.bookings import stay_row_id
from ..projections.rooms import available_rooms, claimed_room_codes, occupancy_index
from ..reference.catalog import DEFAULT_VISA_TYPE
from ..schemas.booking import BookingResult, CreateBookingRequest
from ..schemas.common import Violation
from ..views.navigation import Navigator
from ..views.screens import BOOKINGS
from .entity_store import EntityStore

logger = logging.getLogger(__name__)

DEFAULT_RELATIONSHIP = "Guest"

# Room status a stay transition leaves the room in
ROOM_STATUS_AFTER = {
    BookingStatus.CHECKED_IN: RoomStatus.OCCUPIED,
    BookingStatus.CHECKED_OUT: RoomStatus.CLEANING,
}


def stay_duration(check_in: Optional[date], check_out: Optional[date]) -> int:
    """Nights between two dates; zero when either is missing or the window is empty."""
    if check_in is None or check_out is None or check_in >= check_out:
        return 0
    return math.ceil((check_out - check_in).days)


def quote_total(rooms: Sequence[Room], check_in: Optional[date], check_out: Optional[date]) -> float:
    """Sum of nightly room prices times the number of nights."""
    if not rooms:
        return 0
    return sum(room.price for room in rooms) * stay_duration(check_in, check_out)


class BookingService:
    """Service for booking-related operations."""

    def __init__(self, store: EntityStore, navigator: Optional[Navigator] = None):
        self.store = store
        self.navigator = navigator

    def availability(
        self,
        check_in: Optional[date] = None,
        check_out: Optional[date] = None,
        editing_customer_id: Optional[str] = None,
    ) -> List[Room]:
        return available_rooms(
            self.store.rooms,
            self.store.customers,
            check_in=check_in,
            check_out=check_out,
            editing_customer_id=editing_customer_id,
        )

    def validate_new_booking(self, request: CreateBookingRequest) -> List[Violation]:
        """
        Check a create-booking form.

        Returns:
            Inline violations; empty when the booking can be created
        """
        violations: List[Violation] = []
        if request.check_in_date is None:
            violations.append(Violation(path="check_in_date", message="Check-in date is required"))
        if request.check_out_date is None:
            violations.append(Violation(path="check_out_date", message="Check-out date is required"))
        if request.check_in_date and request.check_out_date and stay_duration(
            request.check_in_date, request.check_out_date
        ) == 0:
            violations.append(Violation(path="check_out_date", message="Check-out must be after check-in"))
        if not request.room_codes:
            violations.append(Violation(path="room_codes", message="Select at least one room"))
        repeated = [code for code in dict.fromkeys(request.room_codes) if request.room_codes.count(code) > 1]
        for code in repeated:
            violations.append(Violation(path="room_codes", message=f"Room {code} is selected more than once"))
        if not request.main_booker_name.strip():
            violations.append(Violation(path="main_booker_name", message="Main booker name is required"))

        if request.room_codes and not violations:
            open_codes = {
                room.room_code
                for room in self.availability(request.check_in_date, request.check_out_date)
            }
            for code in request.room_codes:
                if code not in open_codes:
                    violations.append(Violation(path="room_codes", message=f"Room {code} is not available"))
        return violations

    def create_booking(self, request: CreateBookingRequest) -> BookingResult:
        """
        Create a booking from the create-booking form.

        Every selected room gets a confirmed stay. Accompanying guests start
        with placeholder immigration details covering the stay window.

        Args:
            request: Create-booking form

        Returns:
            Result holding the booking and its first row id, or the violations
        """
        violations = self.validate_new_booking(request)
        if violations:
            logger.info(
                "Booking rejected",
                extra={"violations": [v.message for v in violations]}
            )
            return BookingResult(violations=violations)

        rooms = [self.store.room_by_code(code) for code in request.room_codes]
        check_in, check_out = request.check_in_date, request.check_out_date
        guests = [
            Guest(
                id=f"G{index + 1}",
                name=g.name,
                guest_type=g.type,
                gender=Gender.OTHER,
                date_of_arrival=check_in,
                visa_type=DEFAULT_VISA_TYPE,
                expire_date_of_stay=check_out,
                relationship=DEFAULT_RELATIONSHIP,
            )
            for index, g in enumerate(request.accompanying_guests)
        ]

        booking = self.store.add_booking(Customer(
            full_name=request.main_booker_name.strip(),
            email=request.main_booker_email.strip(),
            check_in_date=check_in,
            check_out_date=check_out,
            room_stays=[RoomStay(room_number=code, booking_status=BookingStatus.CONFIRMED) for code in request.room_codes],
            payment_status=request.payment_status,
            email_status=EmailStatus.SENT if request.send_email else EmailStatus.NOT_SENT,
            adults=1 + sum(1 for g in request.accompanying_guests if g.type == GuestType.ADULT),
            children=sum(1 for g in request.accompanying_guests if g.type == GuestType.CHILD),
            guest_list=guests,
            total_price=quote_total(rooms, check_in, check_out),
            visa_type=DEFAULT_VISA_TYPE,
            expire_date_of_stay=check_out,
            relationship=DEFAULT_RELATIONSHIP,
            tm30_status=TM30Status.PENDING,
        ))
        row_id = stay_row_id(booking.id, request.room_codes[0])

        logger.info(
            "Booking created",
            extra={
                "customer_id": booking.id,
                "booking_id": booking.booking_id,
                "rooms": booking.room_numbers,
                "total_price": booking.total_price,
            }
        )
        if self.navigator is not None:
            self.navigator.navigate(BOOKINGS, row_id, f"Booking for {booking.full_name} created")
        return BookingResult(booking=booking, row_id=row_id)

    def set_stay_status(self, customer_id: str, room_number: str, status: BookingStatus) -> Optional[Customer]:
        """
        Move one room stay to a new status and update the room to match.

        Checking in occupies the room, checking out sends it to cleaning, and
        cancelling a checked-in stay frees it.

        Raises:
            RoomUnavailableError: If reactivating the stay would double-book the room
        """
        status = BookingStatus(status)
        customer = self._booking(customer_id)
        if customer is None:
            return None

        previous = next((s.booking_status for s in customer.room_stays if s.room_number == room_number), None)
        if previous is None:
            logger.warning(
                "Room stay not found",
                extra={"customer_id": customer_id, "room_number": room_number}
            )
            return customer
        if status in ACTIVE_STAY_STATUSES and previous not in ACTIVE_STAY_STATUSES:
            claimed = claimed_room_codes(
                self.store.customers,
                check_in=customer.check_in_date,
                check_out=customer.check_out_date,
                editing_customer_id=customer_id,
            )
            if room_number in claimed:
                raise RoomUnavailableError(room_number, customer_id)

        stays = [
            stay.model_copy(update={"booking_status": status}) if stay.room_number == room_number else stay
            for stay in customer.room_stays
        ]
        updated = self.store.update_booking(customer_id, {"room_stays": stays})

        room_status = ROOM_STATUS_AFTER.get(status)
        if status == BookingStatus.CANCELLED and previous == BookingStatus.CHECKED_IN:
            room_status = RoomStatus.AVAILABLE
        if room_status is not None:
            room = self.store.room_by_code(room_number)
            if room is not None:
                self.store.update_room(room.id, {"status": room_status})
        self._refresh_occupancy_gauge()

        logger.info(
            "Room stay status changed",
            extra={
                "customer_id": customer_id,
                "room_number": room_number,
                "from_status": previous.value,
                "to_status": status.value,
            }
        )
        return updated

    def reassign_room(self, customer_id: str, old_room: str, new_room: str) -> Optional[Customer]:
        """
        Move a stay of a booking to another room.

        Raises:
            RoomUnavailableError: If the new room is not available to this booking
        """
        customer = self._booking(customer_id)
        if customer is None:
            return None
        if old_room not in customer.room_numbers:
            logger.warning(
                "Room stay not found",
                extra={"customer_id": customer_id, "room_number": old_room}
            )
            metrics_collector.record_lookup_miss("room_stay")
            return customer
        if old_room == new_room:
            return customer
        if new_room in customer.room_numbers:
            raise RoomUnavailableError(new_room, customer_id)

        open_codes = {
            room.room_code
            for room in self.availability(
                customer.check_in_date, customer.check_out_date, editing_customer_id=customer_id
            )
        }
        if new_room not in open_codes:
            raise RoomUnavailableError(new_room, customer_id)

        stays = [
            stay.model_copy(update={"room_number": new_room}) if stay.room_number == old_room else stay
            for stay in customer.room_stays
        ]
        updated = self.store.update_booking(customer_id, {"room_stays": stays})
        logger.info(
            "Room reassigned",
            extra={"customer_id": customer_id, "old_room": old_room, "new_room": new_room}
        )
        return updated

    def send_confirmation(self, customer_id: str, email: str) -> Optional[Customer]:
        """Record that the confirmation email went to `email`."""
        updated = self.store.update_booking(
            customer_id, {"email": email.strip(), "email_status": EmailStatus.SENT}
        )
        if updated is not None:
            logger.info("Confirmation email sent", extra={"customer_id": customer_id, "email": updated.email})
        return updated

    def remove_booking(self, customer_id: str) -> bool:
        removed = self.store.remove_booking(customer_id)
        if removed:
            self._refresh_occupancy_gauge()
        return removed

    def _booking(self, customer_id: str) -> Optional[Customer]:
        customer = self.store.get_booking(customer_id)
        if customer is None:
            logger.warning("Booking not found", extra={"customer_id": customer_id})
            metrics_collector.record_lookup_miss("booking")
        return customer

    def _refresh_occupancy_gauge(self) -> None:
        metrics_collector.set_rooms_occupied(len(occupancy_index(self.store.customers)))
