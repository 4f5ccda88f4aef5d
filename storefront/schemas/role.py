"""Role names and request/response schemas for role endpoints."""

from enum import Enum

from pydantic import BaseModel, Field


class RoleName(str, Enum):
    """Closed set of role names understood by the authorization gate."""

    USER = "user"
    ADMIN = "admin"

    @classmethod
    def parse(cls, value: str | None) -> "RoleName | None":
        """Return the RoleName for a stored name, or None when it is not a known role."""
        try:
            return cls(value)
        except ValueError:
            return None


ALLOWED_ROLE_NAMES: tuple[str, ...] = tuple(r.value for r in RoleName)


class RoleCreate(BaseModel):
    """Body for POST /role."""

    name: RoleName = Field(..., description="Role name: user or admin")


class RoleUpdate(BaseModel):
    """Body for PUT /role/{id} (administrative rename)."""

    name: RoleName = Field(..., description="New role name")


class RoleRead(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    name: str
