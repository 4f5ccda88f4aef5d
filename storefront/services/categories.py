"""Category CRUD and per-category product listing."""

import logging

from sqlalchemy.orm import Session

from storefront.core.errors import NotFoundError
from storefront.models import Category, Product
from storefront.schemas.auth import CurrentUser
from storefront.schemas.category import CategoryCreate, CategoryRead, CategoryUpdate
from storefront.schemas.product import ProductRead
from storefront.services.identifiers import parse_id

logger = logging.getLogger(__name__)

CATEGORY_NOT_FOUND = "Category not found"


def find_category(session: Session, raw_id: str | int) -> Category:
    """Resolve a category id or raise NotFoundError("Category not found")."""
    category_id = parse_id(raw_id, "Category")
    category = session.get(Category, category_id)
    if category is None:
        raise NotFoundError(CATEGORY_NOT_FOUND)
    return category


def create_category(
    session: Session, body: CategoryCreate, creator: CurrentUser
) -> CategoryRead:
    category = Category(
        name=body.name,
        description=body.description,
        created_by_username=creator.username,
        created_by_role=creator.role.value,
    )
    session.add(category)
    session.commit()
    session.refresh(category)
    logger.info("Category created: id=%s by=%s", category.id, creator.username)
    return CategoryRead.model_validate(category)


def list_categories(session: Session) -> list[CategoryRead]:
    categories = session.query(Category).order_by(Category.id).all()
    return [CategoryRead.model_validate(c) for c in categories]


def get_category(session: Session, raw_id: str) -> CategoryRead:
    return CategoryRead.model_validate(find_category(session, raw_id))


def get_category_by_name(session: Session, name: str) -> CategoryRead:
    """First category with exactly this name; names are not unique."""
    category = (
        session.query(Category)
        .filter(Category.name == name)
        .order_by(Category.id)
        .first()
    )
    if category is None:
        raise NotFoundError(CATEGORY_NOT_FOUND)
    return CategoryRead.model_validate(category)


def list_category_products(session: Session, raw_id: str) -> list[ProductRead]:
    category = find_category(session, raw_id)
    products = (
        session.query(Product)
        .filter(Product.category_id == category.id)
        .order_by(Product.id)
        .all()
    )
    return [ProductRead.model_validate(p) for p in products]


def update_category(session: Session, raw_id: str, body: CategoryUpdate) -> CategoryRead:
    category = find_category(session, raw_id)
    changes = body.model_dump(exclude_unset=True)
    if "name" in changes:
        category.name = changes["name"]
    if "description" in changes:
        category.description = changes["description"]
    session.commit()
    session.refresh(category)
    logger.info("Category updated: id=%s fields=%s", category.id, ",".join(sorted(changes)))
    return CategoryRead.model_validate(category)


def delete_category(session: Session, raw_id: str) -> CategoryRead:
    """Delete a category. Products that reference it are left untouched."""
    category = find_category(session, raw_id)
    deleted = CategoryRead.model_validate(category)
    session.delete(category)
    session.commit()
    logger.info("Category deleted: id=%s", deleted.id)
    return deleted
