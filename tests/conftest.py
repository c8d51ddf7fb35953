"""Test configuration and fixtures."""

from datetime import date

import pytest

from frontdesk.models.booking import BookingStatus, Customer, Guest, RoomStay
from frontdesk.models.room import Room, RoomStatus, RoomType
from frontdesk.seed import seed_store
from frontdesk.services.entity_store import EntityStore

TODAY = date(2025, 1, 15)


class ManualHandle:
    """Timer handle driven by ManualScheduler."""

    def __init__(self, due: float, callback):
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler whose clock only moves when a test advances it."""

    def __init__(self):
        self.now = 0.0
        self.handles = []

    def call_later(self, delay, callback):
        handle = ManualHandle(self.now + delay, callback)
        self.handles.append(handle)
        return handle

    @property
    def pending(self):
        return [h for h in self.handles if not h.cancelled]

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing every live timer that comes due in order."""
        target = self.now + seconds
        while True:
            due = sorted(
                (h for h in self.handles if not h.cancelled and h.due <= target),
                key=lambda h: h.due,
            )
            if not due:
                break
            handle = due[0]
            self.handles.remove(handle)
            self.now = handle.due
            handle.callback()
        self.now = target


@pytest.fixture
def scheduler():
    """Manually driven timer scheduler."""
    return ManualScheduler()


@pytest.fixture
def store():
    """Empty entity store."""
    return EntityStore()


@pytest.fixture
def seeded_store():
    """Entity store loaded with the demo dataset anchored on a fixed day."""
    return seed_store(EntityStore(), TODAY)


@pytest.fixture
def today():
    """Anchor day of the seeded dataset."""
    return TODAY


@pytest.fixture
def sample_room_data():
    """Sample room data for testing."""
    return {
        "id": "R1",
        "room_code": "RM101",
        "floor": "1st Floor",
        "type": RoomType.STANDARD,
        "price": 1500,
        "status": RoomStatus.AVAILABLE,
        "max_occupancy": 2,
    }


@pytest.fixture
def sample_booking_data():
    """Sample booking data for testing."""
    return {
        "id": "C1",
        "booking_id": "B100001",
        "full_name": "Katie Jones",
        "email": "katie.jones@example.com",
        "passport_id": "P555666777",
        "nationality": "British",
        "gender": "Female",
        "occupation": "Designer",
        "current_address": "15 Windsor Way, London, UK",
        "check_in_date": "2024-07-28",
        "check_out_date": "2024-08-02",
        "room_stays": [{"room_number": "RM101", "booking_status": "Confirmed"}],
    }


def make_room(code: str, status: RoomStatus = RoomStatus.AVAILABLE, **kwargs) -> Room:
    """Room with its id derived from the code."""
    return Room(id=f"R_{code}", room_code=code, status=status, **kwargs)


def make_booking(
    customer_id: str,
    rooms=(),
    status: BookingStatus = BookingStatus.CONFIRMED,
    check_in: str = "2024-07-28",
    check_out: str = "2024-08-02",
    **kwargs,
) -> Customer:
    """Booking holding every room in `rooms` with the same stay status."""
    kwargs.setdefault("booking_id", f"B_{customer_id}")
    return Customer(
        id=customer_id,
        check_in_date=check_in,
        check_out_date=check_out,
        room_stays=[RoomStay(room_number=code, booking_status=status) for code in rooms],
        **kwargs,
    )


def make_guest(guest_id: str, **kwargs) -> Guest:
    kwargs.setdefault("passport_id", f"P_{guest_id}")
    kwargs.setdefault("occupation", "Student")
    kwargs.setdefault("current_address", "1 Main St")
    return Guest(id=guest_id, **kwargs)
