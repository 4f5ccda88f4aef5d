"""Auth gate dependencies: token authentication, live role resolution, role authorization."""

import logging
from collections.abc import Callable
from typing import Annotated

import jwt
from fastapi import Depends, Request
from fastapi.security import APIKeyHeader
from sqlalchemy.orm import Session

from storefront.core.database import get_db
from storefront.core.errors import ForbiddenError, UnauthorizedError
from storefront.core.security import decode_access_token
from storefront.schemas.auth import CurrentUser, TokenClaims
from storefront.schemas.role import RoleName
from storefront.services.roles import RoleResolver

logger = logging.getLogger(__name__)

# Read the raw header so both "<token>" and "Bearer <token>" are accepted.
authorization_header = APIKeyHeader(
    name="Authorization",
    auto_error=False,
    description="Access token, either raw or as 'Bearer <token>'",
)

BEARER_PREFIX = "bearer "


def extract_token(header_value: str | None) -> str | None:
    """Return the token from an Authorization header value, or None when absent."""
    if not header_value:
        return None
    value = header_value.strip()
    if value.lower().startswith(BEARER_PREFIX):
        value = value[len(BEARER_PREFIX):].strip()
    return value or None


def get_current_claims(
    request: Request,
    authorization: Annotated[str | None, Depends(authorization_header)],
) -> TokenClaims:
    """Dependency: require a valid access token and return its claims. Raises 401 otherwise."""
    token = extract_token(authorization)
    if token is None:
        raise UnauthorizedError("No token provided, access denied!")
    try:
        claims = decode_access_token(token)
    except jwt.InvalidTokenError:
        raise UnauthorizedError("Invalid token!")
    request.state.claims = claims
    return claims


def get_role_resolver(db: Annotated[Session, Depends(get_db)]) -> RoleResolver:
    """Dependency: store-backed resolver for the caller's live role."""
    return RoleResolver(db)


def require_roles(*allowed: RoleName) -> Callable[..., CurrentUser]:
    """
    Build a dependency that admits only users whose current role is in allowed.

    The role is looked up through the resolver on every request; the role claim
    inside the token is not trusted. Raises 403 for a missing user or other role.
    """
    allowed_roles = frozenset(allowed)

    def dependency(
        claims: Annotated[TokenClaims, Depends(get_current_claims)],
        resolver: Annotated[RoleResolver, Depends(get_role_resolver)],
    ) -> CurrentUser:
        current = resolver.resolve(claims.subject_id)
        if current is None or current.role not in allowed_roles:
            logger.warning(
                "Authorization denied: subject=%s required=%s",
                claims.subject_id,
                ",".join(sorted(r.value for r in allowed_roles)),
            )
            raise ForbiddenError("You do not have permission to access this resource!")
        return current

    return dependency


require_admin = require_roles(RoleName.ADMIN)
