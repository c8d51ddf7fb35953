"""Customer roll-up schemas."""

from pydantic import BaseModel, Field

from ..models.booking import Customer, Gender


class UniqueCustomer(BaseModel):
    """One person, collapsed from every booking sharing an email."""

    id: str = Field(..., description="Email, used as the row key")
    full_name: str
    email: str
    passport_id: str
    nationality: str
    gender: Gender
    latest_customer_record: Customer = Field(..., description="Booking with the latest check-in")
