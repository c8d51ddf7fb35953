"""Room model definitions."""

from enum import Enum

from pydantic import Field

from .base import EntityModel


class RoomStatus(str, Enum):
    """Room status enumeration."""
    AVAILABLE = "Available"
    OCCUPIED = "Occupied"
    CLEANING = "Cleaning"
    MAINTENANCE = "Maintenance"


class RoomType(str, Enum):
    """Room category enumeration."""
    STANDARD = "Standard"
    SUPERIOR = "Superior"
    DELUXE = "Deluxe"
    CONNECTING = "Connecting"


class BedType(str, Enum):
    """Bed configuration enumeration."""
    KING = "King Bed"
    QUEEN = "Queen Bed"
    TWIN = "Twin Bed"
    SINGLE = "Single Bed"


class Room(EntityModel):
    """A physical room. `room_code` is the human-facing key bookings refer to."""

    id: str = Field(..., min_length=1)
    room_code: str = Field(..., min_length=1)
    floor: str = ""
    floor_and_view: str = Field("", alias="floorAndview")
    type: RoomType = RoomType.STANDARD
    bed_type: BedType = BedType.KING
    price: float = Field(0, ge=0)
    status: RoomStatus = RoomStatus.AVAILABLE
    max_occupancy: int = Field(2, ge=0)
    description: str = ""
    internal_notes: str = ""

    def __repr__(self) -> str:
        return f"<Room(id={self.id}, room_code='{self.room_code}', status={self.status.value})>"
