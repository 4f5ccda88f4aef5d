"""Category endpoints: public reads, admin-only writes."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from storefront.api.deps import require_admin
from storefront.core.database import get_db
from storefront.schemas.auth import CurrentUser
from storefront.schemas.category import CategoryCreate, CategoryRead, CategoryUpdate
from storefront.schemas.product import ProductRead
from storefront.services import categories

router = APIRouter()


@router.post("", response_model=CategoryRead, status_code=status.HTTP_201_CREATED)
def create_category(
    body: CategoryCreate,
    db: Annotated[Session, Depends(get_db)],
    admin: Annotated[CurrentUser, Depends(require_admin)],
) -> CategoryRead:
    """Create a category; the calling admin is recorded as created_by."""
    return categories.create_category(db, body, creator=admin)


@router.get("", response_model=list[CategoryRead])
def list_categories(db: Annotated[Session, Depends(get_db)]) -> list[CategoryRead]:
    return categories.list_categories(db)


@router.get("/name/{name}", response_model=CategoryRead)
def get_category_by_name(
    name: str,
    db: Annotated[Session, Depends(get_db)],
) -> CategoryRead:
    return categories.get_category_by_name(db, name)


@router.get("/{category_id}/products", response_model=list[ProductRead])
def list_category_products(
    category_id: str,
    db: Annotated[Session, Depends(get_db)],
) -> list[ProductRead]:
    """Products whose category_id is this category; 404 if the category does not exist."""
    return categories.list_category_products(db, category_id)


@router.get("/{category_id}", response_model=CategoryRead)
def get_category(
    category_id: str,
    db: Annotated[Session, Depends(get_db)],
) -> CategoryRead:
    return categories.get_category(db, category_id)


@router.put("/{category_id}", response_model=CategoryRead)
def update_category(
    category_id: str,
    body: CategoryUpdate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> CategoryRead:
    return categories.update_category(db, category_id, body)


@router.delete("/{category_id}", response_model=CategoryRead)
def delete_category(
    category_id: str,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> CategoryRead:
    """Delete a category and return it. Its products are kept as they are."""
    return categories.delete_category(db, category_id)
