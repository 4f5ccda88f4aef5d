"""Role lookup table, role CRUD, and the store-backed role resolver used by the auth gate."""

import logging

from sqlalchemy.orm import Session

from storefront.core.errors import NotFoundError, ValidationFailedError
from storefront.models import Role, User
from storefront.schemas.auth import CurrentUser
from storefront.schemas.role import RoleCreate, RoleName, RoleUpdate
from storefront.services.identifiers import parse_id

logger = logging.getLogger(__name__)


def ensure_default_roles(session: Session) -> int:
    """Insert a row for every RoleName not yet stored. Returns the number inserted."""
    existing = {name for (name,) in session.query(Role.name).all()}
    missing = [r.value for r in RoleName if r.value not in existing]
    for name in missing:
        session.add(Role(name=name))
    if missing:
        session.commit()
        logger.info("Seeded roles: %s", ", ".join(missing))
    return len(missing)


def get_role_by_name(session: Session, name: str) -> Role | None:
    return session.query(Role).filter(Role.name == name).first()


def list_roles(session: Session) -> list[Role]:
    return session.query(Role).order_by(Role.id).all()


def get_role(session: Session, raw_id: str | int) -> Role:
    role_id = parse_id(raw_id, "Role")
    role = session.get(Role, role_id)
    if role is None:
        raise NotFoundError("Role not found")
    return role


def _ensure_name_free(session: Session, name: str, exclude_id: int | None = None) -> None:
    query = session.query(Role).filter(Role.name == name)
    if exclude_id is not None:
        query = query.filter(Role.id != exclude_id)
    if query.first() is not None:
        raise ValidationFailedError(
            "Role already exists!",
            errors=[{"field": "name", "message": f"Role '{name}' already exists"}],
        )


def create_role(session: Session, body: RoleCreate) -> Role:
    _ensure_name_free(session, body.name.value)
    role = Role(name=body.name.value)
    session.add(role)
    session.commit()
    session.refresh(role)
    logger.info("Role created: id=%s name=%s", role.id, role.name)
    return role


def update_role(session: Session, raw_id: str | int, body: RoleUpdate) -> Role:
    role = get_role(session, raw_id)
    _ensure_name_free(session, body.name.value, exclude_id=role.id)
    role.name = body.name.value
    session.commit()
    session.refresh(role)
    logger.info("Role renamed: id=%s name=%s", role.id, role.name)
    return role


def delete_role(session: Session, raw_id: str | int) -> None:
    """Delete a role. Refused while any user still holds it (users need exactly one role)."""
    role = get_role(session, raw_id)
    in_use = session.query(User.id).filter(User.role_id == role.id).first()
    if in_use is not None:
        raise ValidationFailedError("Role is still assigned to users!")
    session.delete(role)
    session.commit()
    logger.info("Role deleted: id=%s", role.id)


class RoleResolver:
    """
    Resolves a token subject to the user's current identity and live role.

    The auth gate consults this on every authorized request instead of trusting
    the role claim in the token, so role changes apply immediately.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def resolve(self, subject_id: int) -> CurrentUser | None:
        """Return the current user, or None if the user is gone or holds an unknown role."""
        user = self._session.get(User, subject_id)
        if user is None or user.role is None:
            return None
        role = RoleName.parse(user.role.name)
        if role is None:
            return None
        return CurrentUser(
            id=user.id,
            username=user.username,
            email=user.email,
            role=role,
        )
