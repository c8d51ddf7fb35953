"""Dashboard schemas."""

from typing import List

from pydantic import BaseModel, Field

from .booking import BookingRow


class DashboardStats(BaseModel):
    """Headline numbers and lists for the dashboard."""

    total_rooms: int = Field(0, ge=0)
    available_rooms: int = Field(0, ge=0)
    booked_rooms: int = Field(0, ge=0, description="Rooms whose status is Occupied")
    todays_check_ins: int = Field(0, ge=0)
    todays_check_outs: int = Field(0, ge=0)
    recent_check_ins: List[BookingRow] = Field(default_factory=list)
    todays_check_out_rows: List[BookingRow] = Field(default_factory=list)
