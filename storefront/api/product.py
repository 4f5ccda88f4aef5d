"""Product endpoints: public reads, admin-only writes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from storefront.api.deps import require_admin
from storefront.core.database import get_db
from storefront.schemas.auth import CurrentUser
from storefront.schemas.product import ProductCreate, ProductRead, ProductUpdate
from storefront.services import products

router = APIRouter()


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
def create_product(
    body: ProductCreate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> ProductRead:
    """
    Create a product in an existing category.

    Returns the product with its category embedded. An unknown category id is
    answered with 404 and nothing is written.
    """
    return products.create_product(db, body)


@router.get("", response_model=list[ProductRead])
def list_products(
    db: Annotated[Session, Depends(get_db)],
    category: Annotated[str | None, Query(description="Only products of this category id")] = None,
) -> list[ProductRead]:
    return products.list_products(db, category=category)


@router.get("/{product_id}", response_model=ProductRead)
def get_product(
    product_id: str,
    db: Annotated[Session, Depends(get_db)],
) -> ProductRead:
    return products.get_product(db, product_id)


@router.put("/{product_id}", response_model=ProductRead)
def update_product(
    product_id: str,
    body: ProductUpdate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> ProductRead:
    return products.update_product(db, product_id, body)


@router.delete("/{product_id}", response_model=ProductRead)
def delete_product(
    product_id: str,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> ProductRead:
    return products.delete_product(db, product_id)
