"""Entity store: the single owner of every in-memory collection."""

import logging
import secrets
import string
import uuid
from collections.abc import Callable, Mapping
from typing import Any, Optional, Union

from ..core.exceptions import ConflictError, DuplicateRoomCodeError, RoomInUseError, ValidationError
from ..core.observability import metrics_collector
from ..models.booking import Customer
from ..models.room import Room
from ..models.user import PendingApproval, Role, User

logger = logging.getLogger(__name__)

Patch = Union[Mapping[str, Any], Any]
Subscriber = Callable[[int], None]


class EntityStore:
    """
    Authoritative in-memory collections of rooms, bookings, users, roles and
    pending approvals.

    Callers only get read-only views (tuples) and change state through the
    named operations below, so the invariants are enforced in one place.
    Every effective mutation bumps `revision` and notifies subscribers;
    projections are recomputed from scratch by the readers.

    Mutations that reference an unknown id are no-ops: they return None or
    False and are logged as lookup misses.
    """

    def __init__(self):
        self._rooms: dict[str, Room] = {}
        self._room_ids_by_code: dict[str, str] = {}
        self._customers: dict[str, Customer] = {}
        self._users: dict[str, User] = {}
        self._roles: dict[str, Role] = {}
        # user id -> role id; the only record of membership
        self._assignments: dict[str, str] = {}
        self._approvals: dict[str, PendingApproval] = {}
        self._revision = 0
        self._subscribers: list[Subscriber] = []

    # -- change notification -------------------------------------------------

    @property
    def revision(self) -> int:
        return self._revision

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Call `callback(revision)` after every mutation. Returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _commit(self, event: str, **context: Any) -> None:
        self._revision += 1
        logger.debug(event, extra={"revision": self._revision, **context})
        for callback in list(self._subscribers):
            callback(self._revision)

    def _miss(self, kind: str, **context: Any) -> None:
        logger.warning(f"Lookup miss: {kind}", extra={"kind": kind, **context})
        metrics_collector.record_lookup_miss(kind)

    # -- rooms -----------------------------------------------------------------

    @property
    def rooms(self) -> tuple[Room, ...]:
        return tuple(self._rooms.values())

    def get_room(self, room_id: str) -> Optional[Room]:
        return self._rooms.get(room_id)

    def room_by_code(self, room_code: str) -> Optional[Room]:
        """Resolve a room code through the code index. A dangling code yields None."""
        room_id = self._room_ids_by_code.get(room_code)
        if room_id is None:
            self._miss("room_code", room_code=room_code)
            return None
        return self._rooms[room_id]

    def has_room_code(self, room_code: str) -> bool:
        return room_code in self._room_ids_by_code

    def add_room(self, room: Room) -> Room:
        """
        Add a room.

        Raises:
            DuplicateRoomCodeError: If the id or room code is already registered
        """
        if room.id in self._rooms or room.room_code in self._room_ids_by_code:
            raise DuplicateRoomCodeError(room.room_code, room.id)

        self._rooms[room.id] = room
        self._room_ids_by_code[room.room_code] = room.id
        self._commit("Room added", room_id=room.id, room_code=room.room_code)
        return room

    def update_room(self, room_id: str, patch: Patch) -> Optional[Room]:
        """
        Replace a room by id, re-indexing its code if it changed.

        Stays that referenced the old code are left as they are; they now
        dangle and render as an unknown room.

        Raises:
            DuplicateRoomCodeError: If the new room code belongs to another room
        """
        current = self._rooms.get(room_id)
        if current is None:
            self._miss("room", room_id=room_id)
            return None

        updated = self._apply(current, patch)
        if updated.id != room_id:
            raise ValidationError(detail=f"Room {room_id} cannot change its id to {updated.id}")
        if updated == current:
            return current
        if updated.room_code != current.room_code:
            owner = self._room_ids_by_code.get(updated.room_code)
            if owner is not None and owner != room_id:
                raise DuplicateRoomCodeError(updated.room_code, room_id)
            del self._room_ids_by_code[current.room_code]
            self._room_ids_by_code[updated.room_code] = room_id

        self._rooms[room_id] = updated
        if updated.status != current.status:
            metrics_collector.record_room_status(updated.status.value)
        self._commit("Room updated", room_id=room_id)
        return updated

    def remove_room(self, room_id: str, *, force: bool = False) -> bool:
        """
        Delete a room.

        Raises:
            RoomInUseError: If a confirmed or checked-in stay still holds the
                room and `force` is not set
        """
        room = self._rooms.get(room_id)
        if room is None:
            self._miss("room", room_id=room_id)
            return False

        holders = self.active_holders(room.room_code)
        if holders:
            if not force:
                raise RoomInUseError(room.room_code, [c.booking_id or c.id for c in holders])
            logger.warning(
                "Room deleted while held by active stays",
                extra={
                    "room_id": room_id,
                    "room_code": room.room_code,
                    "booking_ids": [c.booking_id for c in holders],
                }
            )

        del self._rooms[room_id]
        del self._room_ids_by_code[room.room_code]
        self._commit("Room removed", room_id=room_id, room_code=room.room_code)
        return True

    def active_holders(self, room_code: str) -> list[Customer]:
        """Bookings with a confirmed or checked-in stay in the given room."""
        return [
            customer
            for customer in self._customers.values()
            if any(stay.room_number == room_code and stay.is_active for stay in customer.room_stays)
        ]

    # -- bookings --------------------------------------------------------------

    @property
    def customers(self) -> tuple[Customer, ...]:
        return tuple(self._customers.values())

    def get_booking(self, customer_id: str) -> Optional[Customer]:
        return self._customers.get(customer_id)

    def booking_by_booking_id(self, booking_id: str) -> Optional[Customer]:
        return next((c for c in self._customers.values() if c.booking_id == booking_id), None)

    def _generate_customer_id(self) -> str:
        while True:
            candidate = f"C{uuid.uuid4().hex[:12]}"
            if candidate not in self._customers:
                return candidate

    def _generate_booking_code(self, length: int = 6) -> str:
        """Generate a booking reference not used by any stored booking."""
        alphabet = string.ascii_uppercase + string.digits
        taken = {c.booking_id for c in self._customers.values()}
        while True:
            candidate = "B" + "".join(secrets.choice(alphabet) for _ in range(length))
            if candidate not in taken:
                return candidate

    def add_booking(self, customer: Customer) -> Customer:
        """
        Append a fully populated booking.

        A blank or already used `id` / `booking_id` is replaced with a fresh
        one, so every stored booking is uniquely addressable.
        """
        stamps = {}
        if not customer.id or customer.id in self._customers:
            stamps["id"] = self._generate_customer_id()
        if not customer.booking_id or self.booking_by_booking_id(customer.booking_id) is not None:
            stamps["booking_id"] = self._generate_booking_code()
        if stamps:
            customer = customer.model_copy(update=stamps)

        self._customers[customer.id] = customer
        metrics_collector.record_booking_created()
        self._commit(
            "Booking added",
            customer_id=customer.id,
            booking_id=customer.booking_id,
            rooms=customer.room_numbers,
        )
        return customer

    def update_booking(self, customer_id: str, patch: Patch) -> Optional[Customer]:
        """
        Replace a booking by id.

        `patch` is either a complete Customer or a mapping of top-level
        fields. `room_stays` and `guest_list` are replaced wholesale; callers
        produce the full next value.
        """
        current = self._customers.get(customer_id)
        if current is None:
            self._miss("booking", customer_id=customer_id)
            return None

        updated = self._apply(current, patch)
        if updated.id != customer_id:
            raise ValidationError(detail=f"Booking {customer_id} cannot change its id to {updated.id}")
        if updated == current:
            return current

        self._customers[customer_id] = updated
        self._commit("Booking updated", customer_id=customer_id)
        return updated

    def remove_booking(self, customer_id: str) -> bool:
        """Delete a booking together with all of its stays and guests."""
        removed = self._customers.pop(customer_id, None)
        if removed is None:
            self._miss("booking", customer_id=customer_id)
            return False

        metrics_collector.record_booking_removed()
        self._commit("Booking removed", customer_id=customer_id, booking_id=removed.booking_id)
        return True

    # -- users -----------------------------------------------------------------

    @property
    def users(self) -> tuple[User, ...]:
        return tuple(self._users.values())

    def get_user(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    def add_user(self, user: User, *, first: bool = False) -> User:
        """
        Add a user. `first=True` puts it at the top of the listing.

        Raises:
            ConflictError: If the id is already taken
        """
        if user.id in self._users:
            raise ConflictError(
                detail=f"User {user.id} already exists",
                conflicting_resource={"user_id": user.id},
            )
        if first:
            self._users = {user.id: user, **self._users}
        else:
            self._users[user.id] = user
        self._commit("User added", user_id=user.id)
        return user

    def update_user(self, user_id: str, patch: Patch) -> Optional[User]:
        current = self._users.get(user_id)
        if current is None:
            self._miss("user", user_id=user_id)
            return None
        updated = self._apply(current, patch)
        if updated.id != user_id:
            raise ValidationError(detail=f"User {user_id} cannot change its id to {updated.id}")
        if updated == current:
            return current
        self._users[user_id] = updated
        self._commit("User updated", user_id=user_id)
        return updated

    def remove_user(self, user_id: str) -> bool:
        if self._users.pop(user_id, None) is None:
            self._miss("user", user_id=user_id)
            return False
        self._assignments.pop(user_id, None)
        self._commit("User removed", user_id=user_id)
        return True

    # -- roles and membership --------------------------------------------------

    @property
    def roles(self) -> tuple[Role, ...]:
        return tuple(self._roles.values())

    def get_role(self, role_id: str) -> Optional[Role]:
        return self._roles.get(role_id)

    def role_by_name(self, name: str) -> Optional[Role]:
        return next((r for r in self._roles.values() if r.name == name), None)

    def add_role(self, role: Role) -> Role:
        """
        Add a role.

        Raises:
            ConflictError: If the id is already taken
        """
        if role.id in self._roles:
            raise ConflictError(
                detail=f"Role {role.id} already exists",
                conflicting_resource={"role_id": role.id},
            )
        self._roles[role.id] = role
        self._commit("Role added", role_id=role.id)
        return role

    def update_role(self, role_id: str, patch: Patch) -> Optional[Role]:
        current = self._roles.get(role_id)
        if current is None:
            self._miss("role", role_id=role_id)
            return None
        updated = self._apply(current, patch)
        if updated.id != role_id:
            raise ValidationError(detail=f"Role {role_id} cannot change its id to {updated.id}")
        if updated == current:
            return current
        self._roles[role_id] = updated
        self._commit("Role updated", role_id=role_id)
        return updated

    def remove_role(self, role_id: str) -> bool:
        """Delete a role; its members become unassigned."""
        if self._roles.pop(role_id, None) is None:
            self._miss("role", role_id=role_id)
            return False
        self._assignments = {u: r for u, r in self._assignments.items() if r != role_id}
        self._commit("Role removed", role_id=role_id)
        return True

    def assign_user_to_role(self, role_id: str, user_id: str) -> bool:
        """Make `role_id` the user's role, moving it out of any previous role."""
        if role_id not in self._roles:
            self._miss("role", role_id=role_id)
            return False
        if user_id not in self._users:
            self._miss("user", user_id=user_id)
            return False
        if self._assignments.get(user_id) == role_id:
            return True

        self._assignments[user_id] = role_id
        self._commit("User assigned to role", role_id=role_id, user_id=user_id)
        return True

    def remove_user_from_role(self, role_id: str, user_id: str) -> bool:
        if self._assignments.get(user_id) != role_id:
            self._miss("role_membership", role_id=role_id, user_id=user_id)
            return False
        del self._assignments[user_id]
        self._commit("User removed from role", role_id=role_id, user_id=user_id)
        return True

    @property
    def role_assignments(self) -> dict[str, str]:
        """Copy of the user id -> role id assignments."""
        return dict(self._assignments)

    def role_members(self, role_id: str) -> list[User]:
        """Users assigned to a role, in user listing order."""
        return [u for u in self._users.values() if self._assignments.get(u.id) == role_id]

    def role_of_user(self, user_id: str) -> Optional[Role]:
        role_id = self._assignments.get(user_id)
        return self._roles.get(role_id) if role_id else None

    # -- pending approvals -----------------------------------------------------

    @property
    def pending_approvals(self) -> tuple[PendingApproval, ...]:
        return tuple(self._approvals.values())

    def get_pending_approval(self, approval_id: str) -> Optional[PendingApproval]:
        return self._approvals.get(approval_id)

    def add_pending_approval(self, approval: PendingApproval) -> PendingApproval:
        if approval.id in self._approvals:
            raise ConflictError(
                detail=f"Approval request {approval.id} already exists",
                conflicting_resource={"approval_id": approval.id},
            )
        self._approvals[approval.id] = approval
        self._commit("Approval request added", approval_id=approval.id)
        return approval

    def remove_pending_approval(self, approval_id: str) -> Optional[PendingApproval]:
        removed = self._approvals.pop(approval_id, None)
        if removed is None:
            self._miss("approval", approval_id=approval_id)
            return None
        self._commit("Approval request removed", approval_id=approval_id)
        return removed

    # -- helpers ---------------------------------------------------------------

    @staticmethod
    def _apply(current, patch: Patch):
        if isinstance(patch, type(current)):
            return patch
        return current.with_changes(patch)
