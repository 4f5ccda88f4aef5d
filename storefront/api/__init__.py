"""API routes."""

from fastapi import APIRouter

from storefront.api import category, health, product, role, user

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(category.router, prefix="/category", tags=["category"])
router.include_router(product.router, prefix="/product", tags=["product"])
router.include_router(user.router, prefix="/user", tags=["user"])
router.include_router(role.router, prefix="/role", tags=["role"])
