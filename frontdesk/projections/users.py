"""User listing joined with derived role membership."""

from typing import Iterable, List, Mapping

from ..models.user import Role, User
from ..schemas.user import UserRow


def user_rows(users: Iterable[User], roles: Iterable[Role], assignments: Mapping[str, str]) -> List[UserRow]:
    """Users in listing order, each with the role `assignments` gives it."""
    roles_by_id = {role.id: role for role in roles}
    return [UserRow(user=user, role=roles_by_id.get(assignments.get(user.id, ""))) for user in users]


def users_not_in_role(users: Iterable[User], assignments: Mapping[str, str], role_id: str) -> List[User]:
    """Candidates for the add-member picker of a role."""
    return [user for user in users if assignments.get(user.id) != role_id]
