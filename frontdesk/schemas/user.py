"""User listing schemas."""

from typing import Optional

from pydantic import BaseModel, Field

from ..models.user import Role, User


class UserRow(BaseModel):
    """A user joined with the role it is assigned to."""

    user: User
    role: Optional[Role] = Field(None, description="Assigned role, derived from role membership")

    @property
    def id(self) -> str:
        return self.user.id

    @property
    def role_name(self) -> str:
        return self.role.name if self.role is not None else ""
