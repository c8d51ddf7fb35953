"""Room service for the room management screen."""

import logging
import uuid
from typing import Any, List, Mapping, Optional

from ..core.observability import metrics_collector
from ..models.room import BedType, Room, RoomStatus
from ..projections.rooms import occupancy_index
from ..reference.catalog import ROOM_PRICES
from ..schemas.common import Violation
from ..schemas.room import CreateRoomRequest
from .entity_store import EntityStore

logger = logging.getLogger(__name__)

ROOM_CODE_PREFIX = "RM"


def full_room_code(number: str) -> str:
    number = number.strip()
    if number.upper().startswith(ROOM_CODE_PREFIX):
        number = number[len(ROOM_CODE_PREFIX):]
    return f"{ROOM_CODE_PREFIX}{number}"


class RoomService:
    """Service for room-related operations."""

    def __init__(self, store: EntityStore):
        self.store = store

    def validate_new_room(self, request: CreateRoomRequest) -> List[Violation]:
        violations: List[Violation] = []
        if not request.room_code.strip():
            violations.append(Violation(path="room_code", message="Room number is required"))
        elif self.store.has_room_code(full_room_code(request.room_code)):
            violations.append(Violation(
                path="room_code",
                message=f"Room {full_room_code(request.room_code)} already exists",
            ))
        if not request.floor.strip():
            violations.append(Violation(path="floor", message="Floor is required"))
        if request.max_occupancy < 1:
            violations.append(Violation(path="max_occupancy", message="Max occupancy must be at least 1"))
        return violations

    def create_room(self, request: CreateRoomRequest) -> tuple[Optional[Room], List[Violation]]:
        """
        Create a room from the room creation form.

        The entered number gets the RM prefix. New rooms start Available with
        a king bed and the nightly tariff of their type.

        Returns:
            The created room (None on failure) and the inline violations
        """
        violations = self.validate_new_room(request)
        if violations:
            return None, violations

        room = self.store.add_room(Room(
            id=f"R{uuid.uuid4().hex[:8]}",
            room_code=full_room_code(request.room_code),
            floor=request.floor,
            type=request.type,
            bed_type=BedType.KING,
            price=ROOM_PRICES.get(request.type.value, 0),
            status=RoomStatus.AVAILABLE,
            max_occupancy=request.max_occupancy,
        ))
        logger.info("Room created", extra={"room_id": room.id, "room_code": room.room_code})
        return room, []

    def set_status(self, room_id: str, status: RoomStatus) -> Optional[Room]:
        """Housekeeping status change."""
        updated = self.store.update_room(room_id, {"status": RoomStatus(status)})
        if updated is not None:
            metrics_collector.set_rooms_occupied(len(occupancy_index(self.store.customers)))
            logger.info(
                "Room status changed",
                extra={"room_id": room_id, "status": updated.status.value}
            )
        return updated

    def update_room(self, room_id: str, patch: Mapping[str, Any]) -> Optional[Room]:
        return self.store.update_room(room_id, patch)

    def delete_room(self, room_id: str, force: bool = False) -> bool:
        """
        Delete a room.

        Raises:
            RoomInUseError: If an active stay still holds the room and `force` is not set
        """
        return self.store.remove_room(room_id, force=force)
