"""Unit tests for the booking, room and role services."""

from datetime import date

import pytest
from conftest import make_booking, make_room

from frontdesk.core.exceptions import RoomInUseError, RoomUnavailableError
from frontdesk.models.booking import BookingStatus, EmailStatus, GuestType
from frontdesk.models.room import BedType, RoomStatus, RoomType
from frontdesk.models.user import PermissionModule, RolePermissions, UserStatus
from frontdesk.schemas.booking import AccompanyingGuestInput, CreateBookingRequest
from frontdesk.schemas.room import CreateRoomRequest
from frontdesk.services import BookingService, RoleService, RoomService
from frontdesk.services.booking_service import quote_total, stay_duration
from frontdesk.services.role_service import (
    SelectionState,
    module_selection_state,
    with_module_all,
    with_permission,
)
from frontdesk.views import Navigator, screens


@pytest.fixture
def hotel_store(store):
    """Store with three rooms and one confirmed booking in RM101 from 9 to 12 August."""
    store.add_room(make_room("RM101", price=1000))
    store.add_room(make_room("RM102", price=1500))
    store.add_room(make_room("RM103", RoomStatus.CLEANING, price=2000))
    store.add_booking(make_booking(
        "C1", ["RM101"], full_name="John Smith", check_in="2024-08-09", check_out="2024-08-12",
    ))
    return store


@pytest.fixture
def sample_booking_request():
    """Sample create-booking form."""
    return CreateBookingRequest(
        check_in_date=date(2024, 8, 10),
        check_out_date=date(2024, 8, 13),
        room_codes=["RM102"],
        main_booker_name="  Katie Jones ",
        main_booker_email="katie.jones@example.com",
        accompanying_guests=[
            AccompanyingGuestInput(name="Tom Jones", type=GuestType.ADULT),
            AccompanyingGuestInput(name="Jerry Jones", type=GuestType.CHILD),
        ],
    )


def test_stay_duration():
    """Test nights are counted between the two dates."""
    assert stay_duration(date(2024, 8, 10), date(2024, 8, 13)) == 3
    assert stay_duration(date(2024, 8, 10), date(2024, 8, 10)) == 0
    assert stay_duration(None, date(2024, 8, 10)) == 0


def test_quote_total(hotel_store):
    """Test the quote sums nightly prices over the stay."""
    rooms = [hotel_store.room_by_code("RM101"), hotel_store.room_by_code("RM102")]

    assert quote_total(rooms, date(2024, 8, 10), date(2024, 8, 12)) == 5000
    assert quote_total([], date(2024, 8, 10), date(2024, 8, 12)) == 0


def test_create_booking(hotel_store, sample_booking_request):
    """Test creating a booking fills in the stay, guests and defaults."""
    navigator = Navigator()
    service = BookingService(hotel_store, navigator)

    result = service.create_booking(sample_booking_request)

    assert result.ok
    booking = result.booking
    assert hotel_store.get_booking(booking.id) == booking
    assert booking.full_name == "Katie Jones"
    assert booking.booking_id.startswith("B")
    assert booking.room_stays[0].room_number == "RM102"
    assert booking.room_stays[0].booking_status == BookingStatus.CONFIRMED
    assert booking.adults == 2
    assert booking.children == 1
    assert booking.total_price == 4500
    assert booking.email_status == EmailStatus.SENT
    assert [g.id for g in booking.guest_list] == ["G1", "G2"]
    assert booking.guest_list[1].guest_type == GuestType.CHILD
    assert booking.guest_list[0].date_of_arrival == date(2024, 8, 10)
    assert booking.guest_list[0].expire_date_of_stay == date(2024, 8, 13)
    assert result.row_id == f"{booking.id}-RM102"

    state = navigator.pending(screens.BOOKINGS)
    assert state.highlight == result.row_id
    assert state.message == "Booking for Katie Jones created"


def test_create_booking_requires_room_and_booker(hotel_store):
    """Test a booking without rooms or a booker name is rejected inline."""
    service = BookingService(hotel_store)

    result = service.create_booking(CreateBookingRequest(
        check_in_date=date(2024, 8, 10), check_out_date=date(2024, 8, 13),
    ))

    assert not result.ok
    assert {v.path for v in result.violations} == {"room_codes", "main_booker_name"}
    assert len(hotel_store.customers) == 1


def test_create_booking_requires_ordered_dates(hotel_store, sample_booking_request):
    """Test a check-out on or before check-in is rejected inline."""
    service = BookingService(hotel_store)
    request = sample_booking_request.model_copy(update={"check_out_date": date(2024, 8, 10)})

    result = service.create_booking(request)

    assert [v.path for v in result.violations] == ["check_out_date"]


def test_create_booking_rejects_claimed_room(hotel_store, sample_booking_request):
    """Test a room held by another booking cannot be booked."""
    service = BookingService(hotel_store)
    request = sample_booking_request.model_copy(update={"room_codes": ["RM101"]})

    result = service.create_booking(request)

    assert [v.message for v in result.violations] == ["Room RM101 is not available"]


def test_create_booking_rejects_repeated_room(hotel_store, sample_booking_request):
    """Test the same room cannot be selected twice in one booking."""
    service = BookingService(hotel_store)
    request = sample_booking_request.model_copy(update={"room_codes": ["RM102", "RM102"]})

    result = service.create_booking(request)

    assert [v.message for v in result.violations] == ["Room RM102 is selected more than once"]
    assert len(hotel_store.customers) == 1


def test_create_booking_after_departure(hotel_store, sample_booking_request):
    """Test a room is bookable from the day its current guest checks out."""
    service = BookingService(hotel_store)
    request = sample_booking_request.model_copy(update={
        "room_codes": ["RM101"],
        "check_in_date": date(2024, 8, 12),
        "check_out_date": date(2024, 8, 14),
    })

    result = service.create_booking(request)

    assert result.ok
    assert result.booking.total_price == 2000


def test_check_in_and_out_moves_room_status(hotel_store):
    """Test stay transitions drive the room status."""
    service = BookingService(hotel_store)

    service.set_stay_status("C1", "RM101", BookingStatus.CHECKED_IN)
    assert hotel_store.room_by_code("RM101").status == RoomStatus.OCCUPIED
    assert hotel_store.get_booking("C1").room_stays[0].booking_status == BookingStatus.CHECKED_IN

    service.set_stay_status("C1", "RM101", "Checked-Out")
    assert hotel_store.room_by_code("RM101").status == RoomStatus.CLEANING


def test_cancel_checked_in_stay_frees_room(hotel_store):
    """Test cancelling a checked-in stay makes the room available again."""
    service = BookingService(hotel_store)
    service.set_stay_status("C1", "RM101", BookingStatus.CHECKED_IN)

    service.set_stay_status("C1", "RM101", BookingStatus.CANCELLED)

    assert hotel_store.room_by_code("RM101").status == RoomStatus.AVAILABLE


def test_reactivating_stay_respects_other_claims(hotel_store):
    """Test a cancelled stay cannot be confirmed again while another booking holds the room."""
    hotel_store.add_booking(make_booking(
        "C2", ["RM101"], status=BookingStatus.CANCELLED, check_in="2024-08-10", check_out="2024-08-11",
    ))
    hotel_store.add_booking(make_booking(
        "C3", ["RM101"], status=BookingStatus.CANCELLED, check_in="2024-08-20", check_out="2024-08-22",
    ))
    service = BookingService(hotel_store)

    with pytest.raises(RoomUnavailableError):
        service.set_stay_status("C2", "RM101", BookingStatus.CONFIRMED)
    assert [c.id for c in hotel_store.active_holders("RM101")] == ["C1"]

    service.set_stay_status("C3", "RM101", BookingStatus.CONFIRMED)
    assert [c.id for c in hotel_store.active_holders("RM101")] == ["C1", "C3"]


def test_set_stay_status_unknown_stay(hotel_store):
    """Test changing a stay the booking does not have leaves it untouched."""
    service = BookingService(hotel_store)
    revision = hotel_store.revision

    assert service.set_stay_status("C1", "RM999", BookingStatus.CHECKED_IN) == hotel_store.get_booking("C1")
    assert service.set_stay_status("C9", "RM101", BookingStatus.CHECKED_IN) is None
    assert hotel_store.revision == revision


def test_reassign_room(hotel_store):
    """Test a stay can move to a free room but not to a claimed or unready one."""
    hotel_store.add_booking(make_booking("C2", ["RM102"], check_in="2024-08-10", check_out="2024-08-11"))
    service = BookingService(hotel_store)
    hotel_store.add_room(make_room("RM104"))

    with pytest.raises(RoomUnavailableError):
        service.reassign_room("C1", "RM101", "RM102")
    with pytest.raises(RoomUnavailableError):
        service.reassign_room("C1", "RM101", "RM103")

    updated = service.reassign_room("C1", "RM101", "RM104")

    assert updated.room_numbers == ["RM104"]


def test_reassign_room_to_own_other_room(hotel_store):
    """Test a stay cannot move onto another room the same booking already holds."""
    hotel_store.add_booking(make_booking("C2", ["RM101", "RM102"], check_in="2024-09-01", check_out="2024-09-03"))
    service = BookingService(hotel_store)

    with pytest.raises(RoomUnavailableError):
        service.reassign_room("C2", "RM101", "RM102")

    assert hotel_store.get_booking("C2").room_numbers == ["RM101", "RM102"]


def test_reassign_room_unknown_stay(hotel_store):
    """Test moving a stay the booking does not have leaves it untouched."""
    service = BookingService(hotel_store)
    revision = hotel_store.revision

    assert service.reassign_room("C1", "RM102", "RM104") == hotel_store.get_booking("C1")
    assert hotel_store.revision == revision


def test_send_confirmation(hotel_store):
    """Test sending the confirmation records the address and the status."""
    service = BookingService(hotel_store)

    updated = service.send_confirmation("C1", " john@x.com ")

    assert updated.email == "john@x.com"
    assert updated.email_status == EmailStatus.SENT


def test_create_room(store):
    """Test a new room gets the prefix, a king bed and the tariff of its type."""
    service = RoomService(store)

    room, violations = service.create_room(CreateRoomRequest(room_code="701", floor="7th Floor", type=RoomType.DELUXE))

    assert violations == []
    assert room.room_code == "RM701"
    assert room.bed_type == BedType.KING
    assert room.status == RoomStatus.AVAILABLE
    assert room.price == 2000
    assert store.room_by_code("RM701") == room


def test_create_room_violations(store):
    """Test duplicate, blank and undersized rooms are rejected inline."""
    service = RoomService(store)
    service.create_room(CreateRoomRequest(room_code="RM701"))

    _, duplicate = service.create_room(CreateRoomRequest(room_code="701"))
    _, blank = service.create_room(CreateRoomRequest(room_code=" ", floor="", max_occupancy=0))

    assert [v.message for v in duplicate] == ["Room RM701 already exists"]
    assert {v.path for v in blank} == {"room_code", "floor", "max_occupancy"}


def test_delete_room_in_use(hotel_store):
    """Test a room with an active stay needs a forced delete."""
    service = RoomService(hotel_store)

    with pytest.raises(RoomInUseError):
        service.delete_room("R_RM101")

    assert service.delete_room("R_RM102") is True


def test_set_room_status(hotel_store):
    """Test housekeeping can change a room status."""
    service = RoomService(hotel_store)

    assert service.set_status("R_RM103", "Available").status == RoomStatus.AVAILABLE
    assert service.set_status("R_NOPE", RoomStatus.AVAILABLE) is None


def test_create_role(store):
    """Test a new role starts with every permission off."""
    service = RoleService(store)

    role, violations = service.create_role("Night Auditor")
    second, _ = service.create_role("Night Auditor")

    assert violations == []
    assert role.id == "ROLE_NIGHT_AUDITOR_1"
    assert second.id == "ROLE_NIGHT_AUDITOR_2"
    assert not role.permissions.booking_management.view
    assert module_selection_state(role.permissions.booking_management) == SelectionState.NONE


def test_create_role_requires_name(store):
    """Test a blank role name is rejected inline."""
    role, violations = RoleService(store).create_role("   ")

    assert role is None
    assert [v.message for v in violations] == ["Role name cannot be empty."]


def test_permission_selection():
    """Test single flags and the module select-all."""
    role_permissions = with_permission(
        with_module_all(RolePermissions(), "room_management", True),
        "room_management",
        "delete",
        False,
    )
    actions = role_permissions.room_management

    assert actions.view and actions.edit_status
    assert actions.delete is False
    assert module_selection_state(actions) == SelectionState.SOME
    assert module_selection_state(with_module_all(role_permissions, "room_management", True).room_management) \
        == SelectionState.ALL


def test_permission_not_applicable():
    """Test setting an action a module does not offer raises error."""
    with pytest.raises(ValueError):
        with_permission(RolePermissions(), PermissionModule.TM30_VERIFICATION, "delete", True)


def test_has_permission(seeded_store):
    """Test permission checks follow the user's role."""
    service = RoleService(seeded_store)
    cleaner = seeded_store.role_members("ROLE_CLEANER")[0]

    assert service.has_permission("U100", PermissionModule.ROLES_AND_PERMISSIONS, "delete")
    assert service.has_permission(cleaner.id, PermissionModule.ROOM_MANAGEMENT, "edit_status")
    assert not service.has_permission(cleaner.id, PermissionModule.BOOKING_MANAGEMENT)

    service.remove_user("ROLE_CLEANER", cleaner.id)
    assert not service.has_permission(cleaner.id, PermissionModule.ROOM_MANAGEMENT)


def test_save_permissions(seeded_store):
    """Test saved permissions apply to every member."""
    service = RoleService(seeded_store)
    role = seeded_store.get_role("ROLE_CLEANER")
    member = service.members(role.id)[0]

    service.save_permissions(role.id, with_permission(role.permissions, "customer_list", "view", True))

    assert service.has_permission(member.id, PermissionModule.CUSTOMER_LIST)


def test_assign_user_from_candidates(seeded_store):
    """Test the add-member picker lists only users outside the role."""
    service = RoleService(seeded_store)
    candidates = service.users_not_in_role("ROLE_SUPER_ADMIN")

    assert "U100" not in [u.id for u in candidates]

    service.assign_user("ROLE_SUPER_ADMIN", candidates[0].id)

    assert [u.id for u in service.members("ROLE_SUPER_ADMIN")] == ["U100", candidates[0].id]


def test_invite_user(seeded_store):
    """Test an invited user leads the listing with a pending status and its role."""
    service = RoleService(seeded_store)

    user = service.invite_user("New Hire", "new@hotel.com", role_id="ROLE_RECEPTIONIST")

    assert seeded_store.users[0] == user
    assert user.status == UserStatus.PENDING_INVITE
    assert seeded_store.role_of_user(user.id).name == "Receptionist"


def test_approve_request(seeded_store):
    """Test approving a request creates an active user in the requested role."""
    service = RoleService(seeded_store)

    user = service.approve("PA2")

    assert user.name == "John Doe"
    assert user.status == UserStatus.ACTIVE
    assert seeded_store.role_of_user(user.id).name == "Manager"
    assert seeded_store.get_pending_approval("PA2") is None
    assert service.approve("PA2") is None


def test_reject_request(seeded_store):
    """Test rejecting a request drops it without creating a user."""
    service = RoleService(seeded_store)
    users = len(seeded_store.users)

    assert service.reject("PA3").user_name == "Peter Jones"
    assert len(seeded_store.users) == users
    assert [a.id for a in seeded_store.pending_approvals] == ["PA1", "PA2"]


def test_delete_role_unassigns(seeded_store):
    """Test deleting a role leaves its former members without permissions."""
    service = RoleService(seeded_store)
    member = service.members("ROLE_ACCOUNTANT")[0]

    assert service.delete_role("ROLE_ACCOUNTANT")

    assert seeded_store.role_of_user(member.id) is None
    assert not service.has_permission(member.id, PermissionModule.CUSTOMER_LIST)
