"""Booking (Customer), RoomStay and Guest model definitions."""

from datetime import date
from enum import Enum
from typing import List

from pydantic import Field, model_validator

from .base import EntityModel, OptionalDate


class BookingStatus(str, Enum):
    """Room stay status enumeration."""
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    CHECKED_IN = "Checked-In"
    CHECKED_OUT = "Checked-Out"
    CANCELLED = "Cancelled"


# Stays that hold a room against other bookings
ACTIVE_STAY_STATUSES = frozenset({BookingStatus.CONFIRMED, BookingStatus.CHECKED_IN})


class PaymentStatus(str, Enum):
    """Payment status enumeration."""
    PAID = "Paid"
    PENDING = "Pending"
    DEPOSIT_PAID = "Deposit Paid"


class EmailStatus(str, Enum):
    """Confirmation email status enumeration."""
    SENT = "Sent"
    NOT_SENT = "Not Sent"


class Gender(str, Enum):
    """Gender enumeration."""
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class GuestType(str, Enum):
    """Guest age category enumeration."""
    ADULT = "Adult"
    CHILD = "Child"
    INFANT = "Infant"


class TM30Status(str, Enum):
    """TM.30 submission status enumeration."""
    PENDING = "Pending Submission"
    SUBMITTED = "Submitted"
    ACKNOWLEDGED = "Acknowledged"


class CustomerStatus(str, Enum):
    """Customer standing enumeration."""
    REGULAR = "Regular"
    VIP = "VIP"
    BLACKLISTED = "Blacklisted"


class ActivityStatus(str, Enum):
    """Customer activity enumeration."""
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class RoomStay(EntityModel):
    """One room's occupancy within a booking; `room_number` is a room code."""

    room_number: str = ""
    booking_status: BookingStatus = BookingStatus.CONFIRMED

    @property
    def is_active(self) -> bool:
        return self.booking_status in ACTIVE_STAY_STATUSES


class Guest(EntityModel):
    """An accompanying traveller nested in a booking."""

    id: str = Field(..., min_length=1)
    name: str = ""
    passport_id: str = ""
    nationality: str = ""
    gender: Gender = Gender.OTHER
    dob: OptionalDate = None
    phone: str = ""
    guest_type: GuestType = GuestType.ADULT
    date_of_arrival: OptionalDate = None
    visa_type: str = ""
    port_of_entry: str = ""
    arrival_card_number: str = ""
    expire_date_of_stay: OptionalDate = None
    relationship: str = ""
    occupation: str = ""
    current_address: str = ""
    arriving_from: str = ""
    going_to: str = ""
    issued_by: str = ""
    remarks: str = ""


class Customer(EntityModel):
    """
    A booking record.

    One Customer is one reservation transaction, possibly spanning several
    room stays and accompanying guests. The same person shows up as several
    Customers linked only by `email`.
    """

    id: str = ""
    booking_id: str = ""
    full_name: str = ""
    nationality: str = ""
    passport_id: str = ""
    dob: OptionalDate = None
    phone: str = ""
    email: str = ""
    guest_type: GuestType = GuestType.ADULT
    customer_status: CustomerStatus = CustomerStatus.REGULAR
    activity_status: ActivityStatus = ActivityStatus.ACTIVE
    current_address: str = ""
    check_in_date: date
    check_out_date: date
    room_stays: List[RoomStay] = Field(default_factory=list)
    payment_status: PaymentStatus = PaymentStatus.PENDING
    email_status: EmailStatus = EmailStatus.NOT_SENT
    adults: int = Field(1, ge=0)
    children: int = Field(0, ge=0)
    guest_list: List[Guest] = Field(default_factory=list)
    gender: Gender = Gender.OTHER
    total_price: float = Field(0, ge=0)
    visa_type: str = ""
    expire_date_of_stay: OptionalDate = None
    port_of_entry: str = ""
    arrival_card_number: str = ""
    relationship: str = ""
    tm30_status: TM30Status = Field(TM30Status.PENDING, alias="tm30Status")
    occupation: str = ""
    arriving_from: str = ""
    going_to: str = ""
    issued_by: str = ""
    remarks: str = ""

    @model_validator(mode="after")
    def check_stay_window(self) -> "Customer":
        if self.check_out_date < self.check_in_date:
            raise ValueError("check_out_date must not be before check_in_date")
        return self

    @property
    def room_numbers(self) -> List[str]:
        return [stay.room_number for stay in self.room_stays]

    @property
    def guest_count(self) -> int:
        return self.adults + self.children

    def find_guest(self, guest_id: str) -> Guest | None:
        return next((g for g in self.guest_list if g.id == guest_id), None)

    def __repr__(self) -> str:
        return (
            f"<Customer(id={self.id}, booking_id='{self.booking_id}', "
            f"full_name='{self.full_name}', rooms={self.room_numbers})>"
        )
