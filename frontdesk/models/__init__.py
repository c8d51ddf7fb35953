"""Models module exporting all in-memory entity models."""

from .booking import (
    ACTIVE_STAY_STATUSES,
    ActivityStatus,
    BookingStatus,
    Customer,
    CustomerStatus,
    EmailStatus,
    Gender,
    Guest,
    GuestType,
    PaymentStatus,
    RoomStay,
    TM30Status,
)
from .room import BedType, Room, RoomStatus, RoomType
from .user import (
    PERMISSION_ACTIONS,
    ApprovalStatus,
    PendingApproval,
    PermissionActions,
    PermissionModule,
    Role,
    RolePermissions,
    User,
    UserStatus,
)

__all__ = [
    # Inventory
    "Room",
    "RoomStatus",
    "RoomType",
    "BedType",

    # Bookings
    "Customer",
    "RoomStay",
    "Guest",
    "BookingStatus",
    "ACTIVE_STAY_STATUSES",
    "PaymentStatus",
    "EmailStatus",
    "Gender",
    "GuestType",
    "TM30Status",
    "CustomerStatus",
    "ActivityStatus",

    # Administration
    "User",
    "UserStatus",
    "Role",
    "RolePermissions",
    "PermissionActions",
    "PermissionModule",
    "PERMISSION_ACTIONS",
    "PendingApproval",
    "ApprovalStatus",
]
