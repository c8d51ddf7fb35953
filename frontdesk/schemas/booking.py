"""Booking-related Pydantic schemas."""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from ..models.booking import BookingStatus, Customer, GuestType, PaymentStatus
from .common import Violation


class AccompanyingGuestInput(BaseModel):
    """Guest line on the create-booking form."""

    name: str = Field("", description="Guest name")
    type: GuestType = Field(GuestType.ADULT, description="Guest age category")


class CreateBookingRequest(BaseModel):
    """Request schema for creating a booking."""

    check_in_date: Optional[date] = Field(None, description="Arrival date")
    check_out_date: Optional[date] = Field(None, description="Departure date")
    room_codes: List[str] = Field(default_factory=list, description="Selected room codes")
    main_booker_name: str = Field("", description="Main booker full name")
    main_booker_email: str = Field("", description="Main booker email")
    accompanying_guests: List[AccompanyingGuestInput] = Field(default_factory=list)
    payment_status: PaymentStatus = Field(PaymentStatus.PENDING, description="Initial payment status")
    send_email: bool = Field(True, description="Send confirmation email on creation")


class BookingRow(BaseModel):
    """One room stay of a booking, flattened for list screens."""

    row_id: str = Field(..., description="`<customer id>-<room number or 'unassigned'>`")
    customer: Customer = Field(..., description="Booking the stay belongs to")
    room_number: str = Field("", description="Room code of the stay")
    booking_status: BookingStatus = Field(..., description="Status of this stay")

    @property
    def customer_id(self) -> str:
        return self.customer.id

    @property
    def full_name(self) -> str:
        return self.customer.full_name

    @property
    def email(self) -> str:
        return self.customer.email

    @property
    def check_in_date(self) -> date:
        return self.customer.check_in_date

    @property
    def check_out_date(self) -> date:
        return self.customer.check_out_date

    @property
    def guest_count(self) -> int:
        return self.customer.guest_count


class BookingResult(BaseModel):
    """Outcome of a create-booking submission."""

    booking: Optional[Customer] = Field(None, description="Created booking")
    row_id: Optional[str] = Field(None, description="Row id of the first created stay")
    violations: List[Violation] = Field(default_factory=list, description="Inline validation errors")

    @property
    def ok(self) -> bool:
        return self.booking is not None and not self.violations
