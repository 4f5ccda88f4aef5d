"""Pydantic request/response schemas."""

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
from storefront.schemas.category import (
    CategoryCreate,
    CategoryRead,
    CategoryUpdate,
    CreatedBy,
)
from storefront.schemas.health import HealthResponse
from storefront.schemas.product import ProductCreate, ProductRead, ProductUpdate
from storefront.schemas.role import RoleCreate, RoleName, RoleRead, RoleUpdate

__all__ = [
    "CategoryCreate",
    "CategoryRead",
    "CategoryUpdate",
    "CreatedBy",
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "ProductCreate",
    "ProductRead",
    "ProductUpdate",
    "RegisterRequest",
    "RoleCreate",
    "RoleName",
    "RoleRead",
    "RoleUpdate",
    "TokenClaims",
    "UserSummary",
    "UserUpdate",
]
