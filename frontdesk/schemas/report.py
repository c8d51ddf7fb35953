"""Government register row schemas (R.R.4 and TM.30)."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class ReportRow(BaseModel):
    """One person in one room stay, as listed on the R.R.4 guest register."""

    booking_id: str = Field(..., description="Booking the stay belongs to")
    check_in_date: date = Field(..., description="Booking check-in date, used for ordering")
    check_in_date_time: str = Field(..., description="DD/MM/YYYY")
    room_number: str
    full_name: str
    nationality: str
    id_number: str
    issued_by: str
    current_address: str
    occupation: str
    arriving_from: str
    going_to: str
    check_out_date_time: Optional[str] = Field(
        None, description="DD/MM/YYYY, only once the stay is checked out"
    )
    remarks: str

    @property
    def row_id(self) -> str:
        return "-".join((
            self.booking_id, self.check_in_date.isoformat(), self.room_number, self.id_number, self.full_name
        ))


class TM30Row(BaseModel):
    """One person as listed on the TM.30 register."""

    id: str = Field(..., description="`<booking id>-<passport id>`")
    check_out_on: date = Field(..., description="Booking check-out date, used for filtering")
    first_name: str
    middle_name: str
    last_name: str
    gender: str = Field(..., description="M or F")
    passport_id: str
    nationality: str = Field(..., description="Three-letter code")
    dob: str = Field(..., description="DD/MM/YYYY")
    check_out_date: str = Field(..., description="DD/MM/YYYY")
    phone: str
