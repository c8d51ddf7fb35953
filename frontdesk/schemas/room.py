"""Room-related Pydantic schemas."""

from typing import Optional

from pydantic import BaseModel, Field

from ..models.booking import Customer
from ..models.room import Room, RoomType


class CreateRoomRequest(BaseModel):
    """Request schema for the room creation form."""

    room_code: str = Field("", description="Room number without the RM prefix")
    floor: str = Field("1st Floor", description="Floor label")
    type: RoomType = Field(RoomType.STANDARD, description="Room category")
    max_occupancy: int = Field(2, ge=0, description="Maximum guests")


class RoomRow(BaseModel):
    """A room joined with the guest currently checked into it."""

    room: Room
    current_guest: Optional[Customer] = Field(
        None, description="Checked-in booking holding the room, from the occupancy index"
    )

    @property
    def room_code(self) -> str:
        return self.room.room_code

    @property
    def is_live_occupied(self) -> bool:
        return self.current_guest is not None
