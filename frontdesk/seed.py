"""Deterministic demo dataset for the in-memory store."""

import logging
from datetime import date, timedelta
from typing import Dict, List, Optional

from .models.booking import (
    BookingStatus,
    Customer,
    CustomerStatus,
    Guest,
    RoomStay,
    TM30Status,
)
from .models.room import BedType, Room, RoomStatus, RoomType
from .models.user import PendingApproval, PermissionActions, Role, RolePermissions, User
from .reference.catalog import ROOM_PRICES
from .services.entity_store import EntityStore

logger = logging.getLogger(__name__)

TOTAL_ROOMS = 45
USER_COUNT = 20

FIRST_NAMES = ("John", "Jane", "Alex", "Emily", "Chris", "Katie", "Michael", "Sarah", "David", "Laura",
               "James", "Linda", "Robert", "Patricia")
LAST_NAMES = ("Smith", "Doe", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis",
              "Rodriguez", "Wilson", "Moore")
OCCUPATIONS = ("Engineer", "Doctor", "Teacher", "Student", "Business Owner", "Retired", "Software Developer",
               "Artist")

VISA_EXEMPTION = "Visa Exemption (ยกเว้นวีซ่า)"
SUVARNABHUMI = "ท่าอากาศยานสุวรรณภูมิ (Suvarnabhumi Airport)"

# (code, floor, type, bed, status, max occupancy, description, view, notes)
MASTER_ROOMS = (
    ("101", 1, RoomType.STANDARD, BedType.KING, RoomStatus.OCCUPIED, 2, "", "Garden View", "AC checked on 2024-07-20."),
    ("102", 1, RoomType.STANDARD, BedType.TWIN, RoomStatus.AVAILABLE, 2, "", "Garden View", ""),
    ("103", 1, RoomType.STANDARD, BedType.KING, RoomStatus.CLEANING, 2, "", "City View", ""),
    ("104", 1, RoomType.SUPERIOR, BedType.KING, RoomStatus.OCCUPIED, 2, "", "Pool View", "Guest requested extra towels."),
    ("105", 1, RoomType.SUPERIOR, BedType.TWIN, RoomStatus.AVAILABLE, 2, "", "Garden View", ""),
    ("201", 2, RoomType.DELUXE, BedType.KING, RoomStatus.AVAILABLE, 2, "", "Ocean View", ""),
    ("202", 2, RoomType.DELUXE, BedType.KING, RoomStatus.OCCUPIED, 2, "", "Ocean View", ""),
    ("203", 2, RoomType.DELUXE, BedType.TWIN, RoomStatus.OCCUPIED, 2, "", "City View", ""),
    ("301", 3, RoomType.CONNECTING, BedType.KING, RoomStatus.OCCUPIED, 4, "", "Mountain View", ""),
    ("302", 3, RoomType.CONNECTING, BedType.TWIN, RoomStatus.OCCUPIED, 0, "Linked to RM301", "Mountain View",
     "Linked room"),
)

FLOOR_LABELS = {1: "1st Floor", 2: "2nd Floor", 3: "3rd Floor"}

# (name, email, phone, passport, nationality, gender, bookings, status, active, checked-in room)
PROFILES = (
    ("John Smith", "j.smith@example.com", "(555) 123-4567", "P71895477", "American", "Male", 12,
     CustomerStatus.VIP, "Active", "RM101"),
    ("Lisa Wong", "lisa.wong@corp.com", "(555) 987-6543", "P80202533", "Canadian", "Female", 5,
     CustomerStatus.REGULAR, "Active", "RM104"),
    ("Robert Brown", "r.brown@mail.com", "(555) 444-3333", "P32350392", "British", "Male", 1,
     CustomerStatus.REGULAR, "Active", "RM202"),
    ("Jane Williams", "j.williams@web.com", "(555) 111-2222", "P63451270", "Australian", "Female", 2,
     CustomerStatus.BLACKLISTED, "Inactive", None),
    ("Sarah Lee", "s.lee@kr.com", "(555) 777-8888", "P75685294", "Korean", "Female", 7,
     CustomerStatus.REGULAR, "Active", None),
)

FULL_ACCESS = {
    "booking_management": dict(view=True, create=True, edit=True, delete=True),
    "room_management": dict(view=True, create=True, edit=True, delete=True, edit_status=True),
    "customer_list": dict(view=True, create=True, edit=True, delete=True, export=True),
    "tm30_verification": dict(view=True, submit=True, verify=True),
    "roles_and_permissions": dict(view=True, create=True, edit=True, delete=True),
}

ROLES = (
    ("ROLE_SUPER_ADMIN", "Super Admin", "Has god-mode access to everything.", FULL_ACCESS),
    ("ROLE_MANAGER", "Manager", "Has full access to all system features.", FULL_ACCESS),
    ("ROLE_RECEPTIONIST", "Receptionist", "Handles bookings, customers, and TM.30 submissions.", {
        "booking_management": dict(view=True, create=True, edit=True, delete=False),
        "room_management": dict(view=True, create=False, edit=False, delete=False, edit_status=False),
        "customer_list": dict(view=True, create=True, edit=True, delete=False, export=False),
        "tm30_verification": dict(view=True, submit=True, verify=False),
        "roles_and_permissions": dict(view=False),
    }),
    ("ROLE_CLEANER", "Cleaner", "Can view rooms and update their cleaning status.", {
        "booking_management": dict(view=False),
        "room_management": dict(view=True, create=False, edit=False, delete=False, edit_status=True),
        "customer_list": dict(view=False),
        "tm30_verification": dict(view=False),
        "roles_and_permissions": dict(view=False),
    }),
    ("ROLE_ACCOUNTANT", "Accountant", "Views booking data for financial reporting.", {
        "booking_management": dict(view=True, create=False, edit=False, delete=False),
        "room_management": dict(view=False),
        "customer_list": dict(view=True, create=False, edit=False, delete=False, export=True),
        "tm30_verification": dict(view=False),
        "roles_and_permissions": dict(view=False),
    }),
)

STAFF_ROLES = ("Manager", "Receptionist", "Cleaner", "Accountant")
STAFF_STATUSES = ("Active", "Pending Invite", "Inactive")


def demo_rooms(today: date) -> List[Room]:
    """The ten hand-described rooms followed by generated ones on floors 3 and up."""
    rooms = [
        Room(
            id=f"R{code}",
            room_code=f"RM{code}",
            floor=FLOOR_LABELS[floor],
            floor_and_view=f"{FLOOR_LABELS[floor]} - {view}",
            type=room_type,
            bed_type=bed,
            price=ROOM_PRICES[room_type.value],
            status=status,
            max_occupancy=occupancy,
            description=description,
            internal_notes=notes,
        )
        for code, floor, room_type, bed, status, occupancy, description, view, notes in MASTER_ROOMS
    ]

    types = (RoomType.STANDARD, RoomType.DELUXE, RoomType.SUPERIOR, RoomType.CONNECTING)
    beds = (BedType.KING, BedType.TWIN, BedType.QUEEN)
    views = ("Garden View", "City View", "Pool View", "Ocean View")
    for i in range(TOTAL_ROOMS - len(MASTER_ROOMS)):
        floor = 3 + i // 10
        room_type = types[i % len(types)]
        rooms.append(Room(
            id=f"R{500 + i}",
            room_code=f"RM{floor * 100 + i % 10 + 3}",
            floor=f"{floor}th Floor",
            floor_and_view=f"{floor}th Floor - {views[i % len(views)]}",
            type=room_type,
            bed_type=beds[i % len(beds)],
            price=ROOM_PRICES[room_type.value],
            status=RoomStatus.AVAILABLE,
            max_occupancy=2,
            internal_notes=f"Last maintenance on {today.year}-01-15" if i % 5 == 0 else "",
        ))
    return rooms


def _profile_bookings(rooms: List[Room], today: date) -> List[Customer]:
    prices = {room.room_code: room.price for room in rooms}
    bookings = []
    for name, email, phone, passport, nationality, gender, count, standing, activity, live_room in PROFILES:
        for i in range(count):
            if i == 0 and live_room:
                check_in = today - timedelta(days=2)
                check_out = today + timedelta(days=5)
                status = BookingStatus.CHECKED_IN
                room_code = live_room
            else:
                check_out = today - timedelta(days=30 + i * 45 + len(name) * 2)
                check_in = check_out - timedelta(days=3 + i % 5)
                status = BookingStatus.CHECKED_OUT
                room_code = rooms[(i + ord(name[0])) % len(rooms)].room_code

            nights = (check_out - check_in).days
            bookings.append(Customer(
                id=f"C_{email}_{i}",
                booking_id=f"B{passport[-4:]}{i}",
                full_name=name,
                email=email,
                phone=phone,
                passport_id=passport,
                nationality=nationality,
                gender=gender,
                check_in_date=check_in,
                check_out_date=check_out,
                room_stays=[RoomStay(room_number=room_code, booking_status=status)],
                adults=1 + i % 2,
                children=i % 3,
                payment_status="Paid",
                email_status="Sent",
                total_price=prices.get(room_code, rooms[0].price) * nights,
                customer_status=standing,
                activity_status=activity,
                dob=date(1980 + i % 15, 1, 1),
                current_address="123 Memory Lane",
                visa_type=VISA_EXEMPTION,
                expire_date_of_stay=check_out,
                port_of_entry=SUVARNABHUMI,
                arrival_card_number=f"TM{passport[-4:]}{i}",
                relationship="Guest",
                tm30_status=TM30Status.ACKNOWLEDGED,
                occupation=OCCUPATIONS[i % len(OCCUPATIONS)],
                arriving_from="Previous City",
                going_to="Next City",
                issued_by=f"Govt. of {nationality}",
                remarks="Returning guest" if i == 1 else "",
            ))
    return bookings


def _family_guest(guest_id: str, name: str, guest_type: str, passport: str, nationality: str, gender: str,
                  dob: str, arrival: date, relationship: str, occupation: str, address: str,
                  arriving_from: str, going_to: str, issued_by: str, arrival_card: str,
                  expire: Optional[str] = "2025-12-31") -> Guest:
    return Guest(
        id=guest_id, name=name, guest_type=guest_type, passport_id=passport, nationality=nationality,
        gender=gender, dob=dob, date_of_arrival=arrival, visa_type=VISA_EXEMPTION,
        port_of_entry=SUVARNABHUMI, arrival_card_number=arrival_card, expire_date_of_stay=expire,
        relationship=relationship, occupation=occupation, current_address=address,
        arriving_from=arriving_from, going_to=going_to, issued_by=issued_by,
    )


def _scenario_bookings(today: date) -> List[Customer]:
    """Bookings covering the occupied rooms, a child guest and two families arriving today."""
    jones_address = "15 Windsor Way, London, UK"
    davis_address = "100 Maple Drive, Toronto, CA"
    return [
        Customer(
            id="C_EW_1", booking_id="B_EW_1", full_name="Emily White", email="emily.white@example.com",
            room_stays=[RoomStay(room_number="RM203", booking_status=BookingStatus.CHECKED_IN)],
            check_in_date="2024-07-29", check_out_date="2024-08-05", nationality="French",
            passport_id="P_EW_123", dob="1990-01-01", payment_status="Paid", email_status="Sent",
            gender="Female", total_price=14000, visa_type="Tourist Visa (TR)",
        ),
        Customer(
            id="C_MJ_1", booking_id="B_MJ_1", full_name="Michael Johnson", email="michael.j@example.com",
            room_stays=[RoomStay(room_number="RM301", booking_status=BookingStatus.CHECKED_IN)],
            check_in_date="2024-07-28", check_out_date="2024-08-10", nationality="American",
            passport_id="P_MJ_456", dob="1985-05-15", customer_status=CustomerStatus.BLACKLISTED,
            activity_status="Inactive", current_address="128 Main St, City, Country", payment_status="Paid",
            email_status="Sent", adults=1, children=1, gender="Male", total_price=32500,
            visa_type=VISA_EXEMPTION, expire_date_of_stay="2024-08-10", port_of_entry=SUVARNABHUMI,
            arrival_card_number="TM123456", relationship="Guest", tm30_status=TM30Status.ACKNOWLEDGED,
            occupation="Engineer", arriving_from="New York, USA", going_to="Bangkok, Thailand",
            issued_by="Govt. of USA",
            guest_list=[_family_guest(
                "G_EJ_1", "Emily Johnson", "Child", "P_EJ_789", "American", "Female", "2015-10-10",
                date(2024, 7, 28), "Child", "Student", "128 Main St, City, Country", "New York, USA",
                "Bangkok, Thailand", "Govt. of USA", "", expire="2024-08-10",
            )],
        ),
        Customer(
            id="C_SC_1", booking_id="B_SC_1", full_name="Sarah Connor", email="sarah.connor@example.com",
            room_stays=[RoomStay(room_number="RM302", booking_status=BookingStatus.CHECKED_IN)],
            check_in_date="2024-07-28", check_out_date="2024-08-10", nationality="American",
            passport_id="P_SC_789", dob="1988-02-20", payment_status="Pending", email_status="Not Sent",
            gender="Female", total_price=32500, visa_type="Tourist Visa (TR)",
        ),
        Customer(
            id="C_KJ_1", booking_id="B10006", full_name="Katie Jones", email="katie.jones@example.com",
            room_stays=[RoomStay(room_number="RM105", booking_status=BookingStatus.CHECKED_IN)],
            check_in_date=today, check_out_date=today + timedelta(days=7), nationality="British",
            passport_id="P555666777", dob="1988-08-08", phone="(555) 888-9999",
            current_address=jones_address, payment_status="Paid", email_status="Sent", adults=2, children=1,
            gender="Female", total_price=9000, visa_type=VISA_EXEMPTION, expire_date_of_stay="2025-12-31",
            port_of_entry=SUVARNABHUMI, arrival_card_number="TM888888", relationship="Family Head",
            tm30_status=TM30Status.ACKNOWLEDGED, occupation="Designer", arriving_from="London, UK",
            going_to="Phuket, Thailand", issued_by="Govt. of UK", remarks="Honeymoon trip",
            guest_list=[
                _family_guest("G_TJ_1", "Tom Jones", "Adult", "P555666888", "British", "Male", "1986-07-12",
                              today, "Spouse", "Architect", jones_address, "London, UK", "Phuket, Thailand",
                              "Govt. of UK", "TM888889"),
                _family_guest("G_JJ_1", "Jerry Jones", "Child", "P555666999", "British", "Male", "2018-02-20",
                              today, "Child", "Student", jones_address, "London, UK", "Phuket, Thailand",
                              "Govt. of UK", "TM888890"),
            ],
        ),
        Customer(
            id="C_DD_1", booking_id="B10007", full_name="David Davis", email="david.davis@example.com",
            room_stays=[RoomStay(room_number="RM401", booking_status=BookingStatus.CHECKED_IN)],
            check_in_date=today, check_out_date=today + timedelta(days=4), nationality="Canadian",
            passport_id="P_DD_123", dob="1982-11-20", phone="(555) 111-2222",
            customer_status=CustomerStatus.VIP, current_address=davis_address, payment_status="Paid",
            email_status="Sent", adults=2, children=2, gender="Male", total_price=18000,
            visa_type=VISA_EXEMPTION, expire_date_of_stay="2025-12-31", port_of_entry=SUVARNABHUMI,
            arrival_card_number="TM_DD_123", relationship="Family Head", tm30_status=TM30Status.ACKNOWLEDGED,
            occupation="Lawyer", arriving_from="Toronto, CA", going_to="Phuket, Thailand",
            issued_by="Govt. of Canada", remarks="Family vacation",
            guest_list=[
                _family_guest("G_SD_1", "Sarah Davis", "Adult", "P_SD_456", "Canadian", "Female", "1984-03-15",
                              today, "Spouse", "Manager", davis_address, "Toronto, CA", "Phuket, Thailand",
                              "Govt. of Canada", "TM_SD_456"),
                _family_guest("G_KD_1", "Kevin Davis", "Child", "P_KD_789", "Canadian", "Male", "2014-08-30",
                              today, "Child", "Student", davis_address, "Toronto, CA", "Phuket, Thailand",
                              "Govt. of Canada", "TM_KD_789"),
                _family_guest("G_LD_1", "Lily Davis", "Child", "P_LD_101", "Canadian", "Female", "2016-12-10",
                              today, "Child", "Student", davis_address, "Toronto, CA", "Phuket, Thailand",
                              "Govt. of Canada", "TM_LD_101"),
            ],
        ),
    ]


def demo_customers(rooms: List[Room], today: date) -> List[Customer]:
    return _profile_bookings(rooms, today) + _scenario_bookings(today)


def demo_roles() -> List[Role]:
    return [
        Role(
            id=role_id,
            name=name,
            description=description,
            permissions=RolePermissions(**{
                module: PermissionActions(**actions) for module, actions in matrix.items()
            }),
        )
        for role_id, name, description, matrix in ROLES
    ]


def demo_users() -> tuple[List[User], Dict[str, str]]:
    """Users plus the role name each one holds."""
    users = [User(id="U100", name="Admin User", email="admin@horizon.com", status="Active",
                  last_login="Today at 9:41 AM")]
    role_names = {"U100": "Super Admin"}
    for i in range(USER_COUNT - 1):
        status = STAFF_STATUSES[i % len(STAFF_STATUSES)]
        user = User(
            id=f"U{101 + i}",
            name=f"{FIRST_NAMES[i % len(FIRST_NAMES)]} {LAST_NAMES[i % len(LAST_NAMES)]}",
            email=f"user{i + 1}@hotel.com",
            status=status,
            last_login=f"{i % 3 + 1} days ago" if status == "Active" else "Never",
        )
        users.append(user)
        role_names[user.id] = STAFF_ROLES[i % len(STAFF_ROLES)]
    return users, role_names


def demo_pending_approvals() -> List[PendingApproval]:
    return [
        PendingApproval(id="PA1", user_name="Sarah Conner", email="s.conner@test.com",
                        requested_role="Receptionist", date_applied="2025-11-25"),
        PendingApproval(id="PA2", user_name="John Doe", email="j.doe@example.net",
                        requested_role="Manager", date_applied="2025-11-24"),
        PendingApproval(id="PA3", user_name="Peter Jones", email="p.jones@web.co",
                        requested_role="Cleaner", date_applied="2025-11-24"),
    ]


def seed_store(store: EntityStore, today: Optional[date] = None) -> EntityStore:
    """
    Load the demo dataset into `store`.

    Args:
        store: Store to populate; expected to be empty
        today: Anchor for the relative stay dates, defaults to the current date

    Returns:
        The populated store
    """
    today = today or date.today()
    rooms = demo_rooms(today)
    for room in rooms:
        store.add_room(room)
    for customer in demo_customers(rooms, today):
        store.add_booking(customer)
    for role in demo_roles():
        store.add_role(role)

    users, role_names = demo_users()
    for user in users:
        store.add_user(user)
        role = store.role_by_name(role_names[user.id])
        if role is not None:
            store.assign_user_to_role(role.id, user.id)
    for approval in demo_pending_approvals():
        store.add_pending_approval(approval)

    logger.info(
        "Demo data seeded",
        extra={
            "rooms": len(store.rooms),
            "bookings": len(store.customers),
            "users": len(store.users),
            "roles": len(store.roles),
        }
    )
    return store
