"""Store and services of the front-desk core."""

from .booking_service import BookingService
from .entity_store import EntityStore
from .projection_service import ProjectionService
from .role_service import RoleService
from .room_service import RoomService

__all__ = ["BookingService", "EntityStore", "ProjectionService", "RoleService", "RoomService"]
