"""Roles, permissions, membership and account approval."""

import logging
import re
import uuid
from enum import Enum
from typing import List, Optional, Tuple

from ..models.user import (
    PERMISSION_ACTIONS,
    PendingApproval,
    PermissionActions,
    PermissionModule,
    Role,
    RolePermissions,
    User,
    UserStatus,
)
from ..projections.users import users_not_in_role
from ..schemas.common import Violation
from .entity_store import EntityStore

logger = logging.getLogger(__name__)

NEW_ROLE_DESCRIPTION = "Newly created role."


class SelectionState(str, Enum):
    """State of a module's select-all checkbox."""
    ALL = "all"
    SOME = "some"
    NONE = "none"


def with_permission(
    permissions: RolePermissions, module: PermissionModule, action: str, value: bool
) -> RolePermissions:
    """Permissions with one action of one module set."""
    module = PermissionModule(module)
    actions = permissions.module(module)
    if action not in PERMISSION_ACTIONS or (action != "view" and getattr(actions, action) is None):
        raise ValueError(f"Action '{action}' does not apply to module {module.value}")
    return permissions.model_copy(
        update={module.value: actions.model_copy(update={action: value})}
    )


def with_module_all(permissions: RolePermissions, module: PermissionModule, value: bool) -> RolePermissions:
    """Permissions with every applicable action of one module set."""
    module = PermissionModule(module)
    actions = permissions.module(module)
    update = {action: value for action in actions.applicable()}
    update["view"] = value
    return permissions.model_copy(update={module.value: actions.model_copy(update=update)})


def module_selection_state(actions: PermissionActions) -> SelectionState:
    flags = [actions.view, *actions.applicable().values()]
    if all(flags):
        return SelectionState.ALL
    if any(flags):
        return SelectionState.SOME
    return SelectionState.NONE


class RoleService:
    """Service for role and account administration."""

    def __init__(self, store: EntityStore):
        self.store = store

    def _role_id_for(self, name: str) -> str:
        slug = re.sub(r"\s+", "_", name.strip().upper())
        n = len(self.store.roles) + 1
        while self.store.get_role(f"ROLE_{slug}_{n}") is not None:
            n += 1
        return f"ROLE_{slug}_{n}"

    def create_role(self, name: str) -> Tuple[Optional[Role], List[Violation]]:
        """
        Create a role with every permission off.

        Returns:
            The created role (None on failure) and the inline violations
        """
        if not name.strip():
            return None, [Violation(path="name", message="Role name cannot be empty.")]

        role = self.store.add_role(Role(
            id=self._role_id_for(name),
            name=name.strip(),
            description=NEW_ROLE_DESCRIPTION,
            permissions=RolePermissions(),
        ))
        logger.info("Role created", extra={"role_id": role.id, "role_name": role.name})
        return role, []

    def delete_role(self, role_id: str) -> bool:
        return self.store.remove_role(role_id)

    def save_permissions(self, role_id: str, permissions: RolePermissions) -> Optional[Role]:
        updated = self.store.update_role(role_id, {"permissions": permissions})
        if updated is not None:
            logger.info("Role permissions saved", extra={"role_id": role_id})
        return updated

    def members(self, role_id: str) -> List[User]:
        return self.store.role_members(role_id)

    def users_not_in_role(self, role_id: str) -> List[User]:
        return users_not_in_role(self.store.users, self.store.role_assignments, role_id)

    def assign_user(self, role_id: str, user_id: str) -> bool:
        return self.store.assign_user_to_role(role_id, user_id)

    def remove_user(self, role_id: str, user_id: str) -> bool:
        return self.store.remove_user_from_role(role_id, user_id)

    def has_permission(self, user_id: str, module: PermissionModule, action: str = "view") -> bool:
        """Whether the user's role grants `action` on `module`. Unassigned users have none."""
        role = self.store.role_of_user(user_id)
        if role is None:
            return False
        return bool(getattr(role.permissions.module(module), action, False))

    def invite_user(self, name: str, email: str, role_id: Optional[str] = None) -> User:
        """Add a user awaiting their invitation, listed first."""
        user = self.store.add_user(
            User(
                id=f"U{uuid.uuid4().hex[:8]}",
                name=name.strip(),
                email=email.strip(),
                status=UserStatus.PENDING_INVITE,
                last_login="Never",
            ),
            first=True,
        )
        if role_id is not None:
            self.store.assign_user_to_role(role_id, user.id)
        logger.info("Invitation sent", extra={"user_id": user.id, "email": user.email})
        return user

    def approve(self, approval_id: str) -> Optional[User]:
        """Turn a pending approval into an active user with the requested role."""
        approval = self.store.remove_pending_approval(approval_id)
        if approval is None:
            return None

        user = self.store.add_user(User(
            id=f"U{uuid.uuid4().hex[:8]}",
            name=approval.user_name,
            email=approval.email,
            status=UserStatus.ACTIVE,
        ))
        role = self.store.role_by_name(approval.requested_role)
        if role is None:
            logger.warning(
                "Requested role not found",
                extra={"approval_id": approval_id, "requested_role": approval.requested_role}
            )
        else:
            self.store.assign_user_to_role(role.id, user.id)
        logger.info("Approval granted", extra={"approval_id": approval_id, "user_id": user.id})
        return user

    def reject(self, approval_id: str) -> Optional[PendingApproval]:
        approval = self.store.remove_pending_approval(approval_id)
        if approval is not None:
            logger.info("Approval rejected", extra={"approval_id": approval_id})
        return approval
