"""User registration, login and account management."""

import logging

from sqlalchemy import or_
from sqlalchemy.orm import Session

from storefront.core.errors import (
    ForbiddenError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationFailedError,
)
from storefront.core.security import create_access_token, hash_password, verify_password
from storefront.models import User
from storefront.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    TokenClaims,
    UserSummary,
    UserUpdate,
)
from storefront.schemas.role import ALLOWED_ROLE_NAMES
from storefront.services.identifiers import parse_id
from storefront.services.roles import get_role_by_name

logger = logging.getLogger(__name__)

DUPLICATE_USER_MESSAGE = "Username or email already exists!"


def to_summary(user: User) -> UserSummary:
    """Public view of a user; never includes the password hash."""
    return UserSummary(
        id=user.id,
        username=user.username,
        email=user.email,
        role=user.role.name if user.role is not None else "",
    )


def _find_conflict(
    session: Session,
    username: str | None,
    email: str | None,
    exclude_id: int | None = None,
) -> User | None:
    clauses = []
    if username is not None:
        clauses.append(User.username == username)
    if email is not None:
        clauses.append(User.email == email)
    if not clauses:
        return None
    query = session.query(User).filter(or_(*clauses))
    if exclude_id is not None:
        query = query.filter(User.id != exclude_id)
    return query.first()


def register(session: Session, body: RegisterRequest) -> User:
    """
    Create a user with the named role.

    Fails with ValidationFailedError when the username or email is taken or the
    role does not exist. The password is stored only as a bcrypt hash.
    """
    if _find_conflict(session, body.username, body.email) is not None:
        raise ValidationFailedError(DUPLICATE_USER_MESSAGE)

    role = get_role_by_name(session, body.role)
    if role is None:
        raise ValidationFailedError(
            f"Invalid role: {body.role}. Allowed roles: {', '.join(ALLOWED_ROLE_NAMES)}."
        )

    user = User(
        username=body.username,
        email=body.email,
        password_hash=hash_password(body.password),
        role_id=role.id,
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    logger.info("User registered: id=%s role=%s", user.id, role.name)
    return user


def login(session: Session, body: LoginRequest) -> LoginResponse:
    """Verify credentials and issue an access token. Both failure modes look identical."""
    user = session.query(User).filter(User.email == body.email).first()
    if user is None or not verify_password(body.password, user.password_hash):
        logger.info("Login failed for a submitted email")
        raise InvalidCredentialsError()

    summary = to_summary(user)
    token = create_access_token(subject_id=user.id, email=user.email, role=summary.role)
    return LoginResponse(token=token, user=summary)


def get_user(session: Session, user_id: int) -> User:
    user = session.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found!")
    return user


def list_users(session: Session) -> list[UserSummary]:
    return [to_summary(u) for u in session.query(User).order_by(User.id).all()]


def ensure_owner(claims: TokenClaims, raw_id: str) -> int:
    """Return the path id when it is the caller's own; otherwise ForbiddenError."""
    user_id = parse_id(raw_id, "User")
    if user_id != claims.subject_id:
        raise ForbiddenError("You can only access your own account!")
    return user_id


def update_user(session: Session, user_id: int, body: UserUpdate) -> User:
    """Apply a partial update. Username/email stay unique across other users."""
    user = get_user(session, user_id)
    changes = body.model_dump(exclude_unset=True)
    if not changes:
        return user

    conflict = _find_conflict(
        session,
        changes.get("username"),
        changes.get("email"),
        exclude_id=user.id,
    )
    if conflict is not None:
        raise ValidationFailedError(DUPLICATE_USER_MESSAGE)

    if "username" in changes:
        user.username = changes["username"]
    if "email" in changes:
        user.email = changes["email"]
    if "password" in changes:
        user.password_hash = hash_password(changes["password"])
    session.commit()
    session.refresh(user)
    logger.info("User updated: id=%s fields=%s", user.id, ",".join(sorted(changes)))
    return user


def delete_user(session: Session, user_id: int) -> None:
    user = get_user(session, user_id)
    session.delete(user)
    session.commit()
    logger.info("User deleted: id=%s", user_id)
