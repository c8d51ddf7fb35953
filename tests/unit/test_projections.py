"""Unit tests for the projection engine."""

from datetime import date

from conftest import make_booking, make_guest, make_room

from frontdesk.models.booking import BookingStatus
from frontdesk.models.room import RoomStatus, RoomType
from frontdesk.models.user import Role, User
from frontdesk.projections import (
    UNKNOWN_ROOM,
    RegistrationState,
    available_rooms,
    booking_for_row,
    booking_history,
    dashboard_stats,
    describe_room_code,
    displayed_registration_state,
    flatten_room_stays,
    floor_options,
    is_registration_complete,
    occupancy_index,
    report_rows,
    room_rows,
    room_type_options,
    tm30_rows,
    total_bookings,
    unique_customers,
    user_rows,
    users_not_in_role,
)
from frontdesk.services.projection_service import ProjectionService
from frontdesk.views.screens import government_report_screen


def test_flatten_one_row_per_stay():
    """Test each room stay becomes its own row with a reconstructible id."""
    customers = [
        make_booking("C1", ["RM101", "RM102"]),
        make_booking("C2", ["RM201"], status=BookingStatus.PENDING),
        make_booking("C3", []),
        make_booking("C4", [""]),
    ]

    rows = flatten_room_stays(customers)

    assert [r.row_id for r in rows] == ["C1-RM101", "C1-RM102", "C2-RM201", "C4-unassigned"]
    assert rows[2].booking_status == BookingStatus.PENDING
    assert rows[0].full_name == rows[1].full_name
    assert booking_for_row(customers, "C4-unassigned").id == "C4"
    assert booking_for_row(customers, "C9-RM101") is None


def test_unique_customer_rollup_picks_latest_check_in():
    """Test the roll-up represents an email by its latest booking."""
    customers = [
        make_booking("C1", ["RM101"], email="a@x.com", check_in="2024-01-01", check_out="2024-01-03"),
        make_booking("C2", ["RM102"], email="b@x.com", full_name="Bea"),
        make_booking("C3", ["RM103"], email="a@x.com", check_in="2024-06-01", check_out="2024-06-04",
                     passport_id="P_NEW"),
    ]

    profiles = unique_customers(customers)

    assert [p.email for p in profiles] == ["a@x.com", "b@x.com"]
    assert profiles[0].latest_customer_record.id == "C3"
    assert profiles[0].passport_id == "P_NEW"
    assert total_bookings(customers, "a@x.com") == 2
    assert [c.id for c in booking_history(customers, "a@x.com")] == ["C3", "C1"]


def test_unique_customer_rollup_tie_keeps_first():
    """Test bookings with the same check-in keep the first one seen."""
    customers = [
        make_booking("C1", ["RM101"], email="a@x.com"),
        make_booking("C2", ["RM102"], email="a@x.com"),
    ]

    assert unique_customers(customers)[0].latest_customer_record.id == "C1"


def test_registration_requires_booker_passport():
    """Test a booker without a passport is incomplete whatever the guests hold."""
    customer = make_booking(
        "C1", ["RM101"], passport_id="", occupation="Engineer", current_address="1 Main St",
        guest_list=[make_guest("G1")],
    )

    assert not is_registration_complete(customer)


def test_registration_requires_every_guest():
    """Test one guest missing an occupation makes the booking incomplete."""
    customer = make_booking(
        "C1", ["RM101"], passport_id="P1", occupation="Engineer", current_address="1 Main St",
        guest_list=[make_guest("G1"), make_guest("G2", occupation="")],
    )

    assert not is_registration_complete(customer)
    complete = customer.with_changes({"guest_list": [make_guest("G1"), make_guest("G2")]})
    assert is_registration_complete(complete)


def test_displayed_registration_state():
    """Test the indicator depends on the stay status."""
    incomplete = make_booking("C1", ["RM101"])

    assert displayed_registration_state(incomplete, BookingStatus.CONFIRMED) == RegistrationState.INCOMPLETE
    assert displayed_registration_state(incomplete, BookingStatus.CHECKED_IN) == RegistrationState.COMPLETE
    assert displayed_registration_state(incomplete, BookingStatus.CHECKED_OUT) == RegistrationState.COMPLETE
    assert displayed_registration_state(incomplete, BookingStatus.CANCELLED) == RegistrationState.NONE


def test_occupancy_index_counts_checked_in_only():
    """Test only checked-in stays occupy a room."""
    customers = [
        make_booking("C1", ["RM101"], status=BookingStatus.CONFIRMED),
        make_booking("C2", ["RM102"], status=BookingStatus.CHECKED_IN),
        make_booking("C3", ["RM103"], status=BookingStatus.CHECKED_OUT),
    ]

    index = occupancy_index(customers)

    assert set(index) == {"RM102"}
    assert index["RM102"].id == "C2"


def test_room_rows_join_live_guest():
    """Test rooms show the checked-in guest even when their status disagrees."""
    rooms = [make_room("RM101", RoomStatus.AVAILABLE), make_room("RM102", RoomStatus.OCCUPIED)]
    customers = [make_booking("C1", ["RM101"], status=BookingStatus.CHECKED_IN)]

    rows = room_rows(rooms, customers)

    assert rows[0].current_guest.id == "C1"
    assert rows[0].is_live_occupied
    assert rows[1].current_guest is None


def test_availability_excludes_claimed_rooms():
    """Test a confirmed stay blocks its room except for the booking that holds it."""
    rooms = [make_room("A"), make_room("B")]
    customers = [make_booking("C1", ["A"], status=BookingStatus.CONFIRMED)]

    assert [r.room_code for r in available_rooms(rooms, customers)] == ["B"]
    assert [r.room_code for r in available_rooms(rooms, customers, editing_customer_id="C1")] == ["A", "B"]


def test_availability_ignores_finished_stays():
    """Test checked-out and cancelled stays do not block a room."""
    rooms = [make_room("A"), make_room("B")]
    customers = [
        make_booking("C1", ["A"], status=BookingStatus.CHECKED_OUT),
        make_booking("C2", ["B"], status=BookingStatus.CANCELLED),
    ]

    assert [r.room_code for r in available_rooms(rooms, customers)] == ["A", "B"]


def test_availability_requires_available_status():
    """Test rooms not marked Available are never offered to a new booking."""
    rooms = [make_room("A", RoomStatus.CLEANING), make_room("B", RoomStatus.MAINTENANCE), make_room("C")]

    assert [r.room_code for r in available_rooms(rooms, [])] == ["C"]


def test_availability_keeps_own_room_when_occupied():
    """Test an edited booking can keep its own room even though the room shows Occupied."""
    rooms = [make_room("A", RoomStatus.OCCUPIED), make_room("B")]
    customers = [make_booking("C1", ["A"], status=BookingStatus.CHECKED_IN)]

    assert [r.room_code for r in available_rooms(rooms, customers, editing_customer_id="C1")] == ["A", "B"]


def test_availability_with_stay_window():
    """Test with a requested window only overlapping claims block a room."""
    rooms = [make_room("A"), make_room("B")]
    customers = [make_booking("C1", ["A"], check_in="2024-07-10", check_out="2024-07-15")]

    before = available_rooms(rooms, customers, check_in=date(2024, 7, 1), check_out=date(2024, 7, 10))
    during = available_rooms(rooms, customers, check_in=date(2024, 7, 14), check_out=date(2024, 7, 20))
    after = available_rooms(rooms, customers, check_in=date(2024, 7, 15), check_out=date(2024, 7, 18))

    assert [r.room_code for r in before] == ["A", "B"]
    assert [r.room_code for r in during] == ["B"]
    assert [r.room_code for r in after] == ["A", "B"]


def test_availability_natural_order():
    """Test candidates are ordered by room number, not by text."""
    rooms = [make_room("RM1001"), make_room("RM99"), make_room("RM101")]

    assert [r.room_code for r in available_rooms(rooms, [])] == ["RM99", "RM101", "RM1001"]


def test_describe_dangling_room_code():
    """Test a stay pointing at a missing room renders as unknown."""
    rooms = {"RM101": make_room("RM101", type=RoomType.DELUXE)}

    assert describe_room_code(rooms, "RM101") == "RM101 (Deluxe)"
    assert describe_room_code(rooms, "RM401") == UNKNOWN_ROOM


def test_floor_options_ordered_by_number():
    """Test floors are listed by their number."""
    rooms = [make_room("A", floor="10th Floor"), make_room("B", floor="2nd Floor"), make_room("C", floor="2nd Floor")]

    assert floor_options(rooms) == ["2nd Floor", "10th Floor"]


def test_room_type_options_first_seen_order():
    """Test room types are listed once each in the order they first appear."""
    rooms = [make_room("A", type=RoomType.DELUXE), make_room("B"), make_room("C", type=RoomType.DELUXE)]

    assert room_type_options(rooms) == ["Deluxe", "Standard"]


def test_report_rows_list_booker_then_guests():
    """Test each stay lists the booker then every guest, check-out only once checked out."""
    customers = [
        make_booking(
            "C2", ["RM201"], status=BookingStatus.CHECKED_OUT, full_name="Late Arrival",
            check_in="2024-08-01", check_out="2024-08-03",
        ),
        make_booking(
            "C1", ["RM101", "RM102"], full_name="Michael Johnson", passport_id="P1",
            guest_list=[make_guest("G1", name="Emily Johnson")],
        ),
    ]

    rows = report_rows(customers)

    assert [(r.room_number, r.full_name) for r in rows] == [
        ("RM101", "Michael Johnson"),
        ("RM101", "Emily Johnson"),
        ("RM102", "Michael Johnson"),
        ("RM102", "Emily Johnson"),
        ("RM201", "Late Arrival"),
    ]
    assert rows[0].check_in_date_time == "28/07/2024"
    assert rows[0].check_out_date_time is None
    assert rows[-1].check_out_date_time == "03/08/2024"
    assert rows[1].id_number == "P_G1"


def test_report_row_keys_are_unique_across_bookings():
    """Test a returning guest in the same room gets one register row key per booking."""
    customers = [
        make_booking("C1", ["RM101"], full_name="Katie Jones", passport_id="P1", check_in="2024-07-01", check_out="2024-07-05"),
        make_booking("C2", ["RM101"], full_name="Katie Jones", passport_id="P1", check_in="2024-08-01", check_out="2024-08-05"),
    ]
    key = government_report_screen().key

    rows = report_rows(customers)

    assert [r.booking_id for r in rows] == ["B_C1", "B_C2"]
    assert len({key(r) for r in rows}) == 2


def test_report_rows_filter_on_check_in():
    """Test the report date range applies to the booking check-in date."""
    customers = [
        make_booking("C1", ["RM101"], check_in="2024-07-01", check_out="2024-07-05"),
        make_booking("C2", ["RM102"], check_in="2024-08-01", check_out="2024-08-05"),
    ]

    rows = report_rows(customers, start=date(2024, 7, 15), end=date(2024, 8, 1))

    assert [r.room_number for r in rows] == ["RM102"]


def test_tm30_rows():
    """Test the TM.30 list splits names and codes gender and nationality."""
    customer = make_booking(
        "C1", ["RM101"], booking_id="B10006", full_name="Mary Ann Smith", passport_id="P1",
        nationality="British", gender="Other", dob="1988-08-08", phone="(555) 888-9999",
        guest_list=[make_guest("G1", name="Tom", nationality="Martian", gender="Male")],
    )

    rows = tm30_rows([customer])

    assert len(rows) == 2
    booker, guest = rows
    assert booker.id == "B10006-P1"
    assert (booker.first_name, booker.middle_name, booker.last_name) == ("Mary", "Ann", "Smith")
    assert booker.gender == "F"
    assert booker.nationality == "GBR"
    assert booker.dob == "08/08/1988"
    assert booker.check_out_date == "02/08/2024"
    assert (guest.first_name, guest.last_name) == ("Tom", "")
    assert guest.gender == "M"
    assert guest.nationality == "MAR"
    assert guest.dob == ""


def test_tm30_rows_filter_on_check_out():
    """Test the TM.30 date range applies to the check-out date."""
    customers = [make_booking("C1", ["RM101"], check_in="2024-07-28", check_out="2024-08-02")]

    assert tm30_rows(customers, start=date(2024, 8, 1), end=date(2024, 8, 2))
    assert not tm30_rows(customers, start=date(2024, 7, 1), end=date(2024, 7, 31))


def test_dashboard_stats():
    """Test headline counts come from room status and the stay windows."""
    today = date(2024, 8, 2)
    rooms = [
        make_room("RM101", RoomStatus.OCCUPIED),
        make_room("RM102", RoomStatus.AVAILABLE),
        make_room("RM103", RoomStatus.CLEANING),
    ]
    customers = [
        make_booking("C1", ["RM101"], status=BookingStatus.CHECKED_IN, check_in="2024-07-28", check_out="2024-08-02"),
        make_booking("C2", ["RM102"], check_in="2024-08-02", check_out="2024-08-04"),
        make_booking("C3", ["RM103"], status=BookingStatus.CHECKED_IN, check_in="2024-07-30", check_out="2024-08-06"),
    ]

    stats = dashboard_stats(rooms, customers, today, recent_limit=1)

    assert stats.total_rooms == 3
    assert stats.available_rooms == 1
    assert stats.booked_rooms == 1
    assert stats.todays_check_ins == 1
    assert stats.todays_check_outs == 1
    assert [r.row_id for r in stats.recent_check_ins] == ["C3-RM103"]
    assert [r.row_id for r in stats.todays_check_out_rows] == ["C1-RM101"]


def test_user_rows_derive_role_from_membership():
    """Test a user's role comes from the assignments."""
    users = [User(id="U1", name="Ann"), User(id="U2", name="Ben")]
    roles = [Role(id="ROLE_A", name="Manager")]
    assignments = {"U1": "ROLE_A"}

    rows = user_rows(users, roles, assignments)

    assert [r.role_name for r in rows] == ["Manager", ""]
    assert [u.id for u in users_not_in_role(users, assignments, "ROLE_A")] == ["U2"]


def test_projection_service_recomputes_after_mutation(store):
    """Test cached projections are dropped when the store changes."""
    projections = ProjectionService(store)
    store.add_booking(make_booking("C1", ["RM101"]))

    first = projections.booking_rows()
    assert projections.booking_rows() is first

    store.add_booking(make_booking("C2", ["RM102"]))

    assert [r.row_id for r in projections.booking_rows()] == ["C1-RM101", "C2-RM102"]


def test_projection_service_seeded(seeded_store, today):
    """Test the seeded projections agree with the dataset."""
    projections = ProjectionService(seeded_store)

    assert len(projections.booking_rows()) == 32
    assert len(projections.unique_customers()) == 10
    assert set(projections.occupancy()) == {
        "RM101", "RM104", "RM202", "RM203", "RM301", "RM302", "RM105", "RM401",
    }
    assert projections.room_label("RM401") == UNKNOWN_ROOM
    available = [r.room_code for r in projections.available_rooms()]
    assert "RM105" not in available
    assert available[:2] == ["RM102", "RM201"]
    assert len(available) == 37

    stats = projections.dashboard(today)
    assert stats.total_rooms == 45
    assert stats.booked_rooms == 6
    assert stats.todays_check_ins == 2
