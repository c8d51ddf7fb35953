"""User, Role and PendingApproval model definitions."""

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import Field

from .base import EntityModel


class UserStatus(str, Enum):
    """Administrative account status enumeration."""
    ACTIVE = "Active"
    PENDING_INVITE = "Pending Invite"
    INACTIVE = "Inactive"


class ApprovalStatus(str, Enum):
    """Self-registration request status enumeration."""
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class PermissionModule(str, Enum):
    """Screens guarded by the permission matrix."""
    BOOKING_MANAGEMENT = "booking_management"
    ROOM_MANAGEMENT = "room_management"
    CUSTOMER_LIST = "customer_list"
    TM30_VERIFICATION = "tm30_verification"
    ROLES_AND_PERMISSIONS = "roles_and_permissions"


PERMISSION_ACTIONS = ("view", "create", "edit", "delete", "edit_status", "submit", "verify", "export")


class User(EntityModel):
    """An administrative account. Role membership lives in the store, not here."""

    id: str = Field(..., min_length=1)
    name: str = ""
    email: str = ""
    status: UserStatus = UserStatus.PENDING_INVITE
    last_login: str = "Never"


class PermissionActions(EntityModel):
    """Action flags for one module. None means the action does not apply to it."""

    view: bool = False
    create: Optional[bool] = None
    edit: Optional[bool] = None
    delete: Optional[bool] = None
    edit_status: Optional[bool] = None
    submit: Optional[bool] = None
    verify: Optional[bool] = None
    export: Optional[bool] = None

    def applicable(self) -> dict[str, bool]:
        """Flags that apply to this module, in display order."""
        return {
            action: getattr(self, action)
            for action in PERMISSION_ACTIONS
            if getattr(self, action) is not None
        }


class RolePermissions(EntityModel):
    """Permission matrix keyed by module."""

    booking_management: PermissionActions = Field(
        default_factory=lambda: PermissionActions(create=False, edit=False, delete=False)
    )
    room_management: PermissionActions = Field(
        default_factory=lambda: PermissionActions(create=False, edit=False, delete=False, edit_status=False)
    )
    customer_list: PermissionActions = Field(
        default_factory=lambda: PermissionActions(create=False, edit=False, delete=False, export=False)
    )
    tm30_verification: PermissionActions = Field(
        default_factory=lambda: PermissionActions(submit=False, verify=False)
    )
    roles_and_permissions: PermissionActions = Field(
        default_factory=lambda: PermissionActions(create=False, edit=False, delete=False)
    )

    def module(self, module: PermissionModule | str) -> PermissionActions:
        return getattr(self, PermissionModule(module).value)


class Role(EntityModel):
    """A named permission bundle."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: str = ""
    permissions: RolePermissions = Field(default_factory=RolePermissions)


class PendingApproval(EntityModel):
    """A self-registration request awaiting a role grant."""

    id: str = Field(..., min_length=1)
    user_name: str = ""
    email: str = ""
    requested_role: str = ""
    date_applied: Optional[date] = None
    status: ApprovalStatus = ApprovalStatus.PENDING
