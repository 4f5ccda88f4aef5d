"""User endpoints: registration, login, self-service and admin management."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_claims, require_admin
from storefront.core.database import get_db
from storefront.schemas.auth import (
    CurrentUser,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    TokenClaims,
    UserSummary,
    UserUpdate,
)
from storefront.services import users
from storefront.services.identifiers import parse_id

router = APIRouter()

# Handlers that hash or check passwords are plain `def`: FastAPI runs them in
# its thread pool, so bcrypt work stays off the event loop.


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Register a user with an existing role. Returns no token; log in afterwards."""
    users.register(db, body)
    return MessageResponse(message="Registration successful!")


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> LoginResponse:
    """
    Authenticate with email and password; returns a JWT access token and the user.
    Send the token in the Authorization header, raw or as: Bearer <token>
    """
    return users.login(db, body)


@router.get("", response_model=UserSummary)
def get_me(
    claims: Annotated[TokenClaims, Depends(get_current_claims)],
    db: Annotated[Session, Depends(get_db)],
) -> UserSummary:
    """Return the caller's own account."""
    return users.to_summary(users.get_user(db, claims.subject_id))


@router.get("/admin", response_model=MessageResponse)
def admin_only(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> MessageResponse:
    return MessageResponse(message="Only admins can see this!")


@router.get("/all", response_model=list[UserSummary])
def list_users(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> list[UserSummary]:
    """List all users (admin only)."""
    return users.list_users(db)


@router.put("/{user_id}", response_model=UserSummary)
def update_me(
    user_id: str,
    body: UserUpdate,
    claims: Annotated[TokenClaims, Depends(get_current_claims)],
    db: Annotated[Session, Depends(get_db)],
) -> UserSummary:
    """Update the caller's own account; any other id is 403."""
    own_id = users.ensure_owner(claims, user_id)
    return users.to_summary(users.update_user(db, own_id, body))


@router.delete("/delete/{user_id}", response_model=MessageResponse)
def delete_by_admin(
    user_id: str,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> MessageResponse:
    users.delete_user(db, parse_id(user_id, "User"))
    return MessageResponse(message="User deleted successfully!")


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_me(
    user_id: str,
    claims: Annotated[TokenClaims, Depends(get_current_claims)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Delete the caller's own account; any other id is 403."""
    own_id = users.ensure_owner(claims, user_id)
    users.delete_user(db, own_id)
    return MessageResponse(message="User deleted successfully!")
