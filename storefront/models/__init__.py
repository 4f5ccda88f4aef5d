"""SQLAlchemy ORM models."""

from storefront.models.base import Base
from storefront.models.category import Category
from storefront.models.product import Product
from storefront.models.role import Role
from storefront.models.user import User

__all__ = ["Base", "Category", "Product", "Role", "User"]
