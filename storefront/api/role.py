"""Role endpoints: public reads, admin-only writes."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from storefront.api.deps import require_admin
from storefront.core.database import get_db
from storefront.schemas.auth import CurrentUser, MessageResponse
from storefront.schemas.role import RoleCreate, RoleRead, RoleUpdate
from storefront.services import roles

router = APIRouter()


@router.get("", response_model=list[RoleRead])
def list_roles(db: Annotated[Session, Depends(get_db)]) -> list[RoleRead]:
    return [RoleRead.model_validate(r) for r in roles.list_roles(db)]


@router.get("/{role_id}", response_model=RoleRead)
def get_role(role_id: str, db: Annotated[Session, Depends(get_db)]) -> RoleRead:
    return RoleRead.model_validate(roles.get_role(db, role_id))


@router.post("", response_model=RoleRead, status_code=status.HTTP_201_CREATED)
def create_role(
    body: RoleCreate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> RoleRead:
    return RoleRead.model_validate(roles.create_role(db, body))


@router.put("/{role_id}", response_model=RoleRead)
def update_role(
    role_id: str,
    body: RoleUpdate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> RoleRead:
    return RoleRead.model_validate(roles.update_role(db, role_id, body))


@router.delete("/{role_id}", response_model=MessageResponse)
def delete_role(
    role_id: str,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> MessageResponse:
    """Delete a role that no user holds."""
    roles.delete_role(db, role_id)
    return MessageResponse(message="Role deleted successfully")
