"""Product CRUD with the category reference check."""

import logging

from sqlalchemy.orm import Session

from storefront.core.errors import NotFoundError
from storefront.models import Product
from storefront.schemas.product import ProductCreate, ProductRead, ProductUpdate
from storefront.services.categories import find_category
from storefront.services.identifiers import parse_id

logger = logging.getLogger(__name__)


def _find_product(session: Session, raw_id: str) -> Product:
    product_id = parse_id(raw_id, "Product")
    product = session.get(Product, product_id)
    if product is None:
        raise NotFoundError("Product not found")
    return product


def create_product(session: Session, body: ProductCreate) -> ProductRead:
    """Create a product after checking that its category exists; no write otherwise."""
    category = find_category(session, body.category)
    product = Product(
        name=body.name,
        description=body.description,
        price=body.price,
        stock=body.stock,
        category_id=category.id,
    )
    session.add(product)
    session.commit()
    session.refresh(product)
    logger.info("Product created: id=%s category_id=%s", product.id, product.category_id)
    return ProductRead.model_validate(product)


def list_products(session: Session, category: str | None = None) -> list[ProductRead]:
    """All products, or only those of one category (which must exist)."""
    query = session.query(Product)
    if category is not None:
        found = find_category(session, category)
        query = query.filter(Product.category_id == found.id)
    return [ProductRead.model_validate(p) for p in query.order_by(Product.id).all()]


def get_product(session: Session, raw_id: str) -> ProductRead:
    return ProductRead.model_validate(_find_product(session, raw_id))


def update_product(session: Session, raw_id: str, body: ProductUpdate) -> ProductRead:
    """Apply the fields present in body. A new category is resolved before anything is written."""
    changes = body.model_dump(exclude_unset=True)
    if "category" in changes:
        find_category(session, changes["category"])
    product = _find_product(session, raw_id)

    if "name" in changes:
        product.name = changes["name"]
    if "description" in changes:
        product.description = changes["description"]
    if "price" in changes:
        product.price = changes["price"]
    if "stock" in changes:
        product.stock = changes["stock"]
    if "category" in changes:
        product.category_id = changes["category"]
    session.commit()
    session.refresh(product)
    logger.info("Product updated: id=%s fields=%s", product.id, ",".join(sorted(changes)))
    return ProductRead.model_validate(product)


def delete_product(session: Session, raw_id: str) -> ProductRead:
    product = _find_product(session, raw_id)
    deleted = ProductRead.model_validate(product)
    session.delete(product)
    session.commit()
    logger.info("Product deleted: id=%s", deleted.id)
    return deleted
