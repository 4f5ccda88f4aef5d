"""Request/response schemas for product endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from storefront.schemas.category import CategoryRead

# stock is stored in a 32-bit signed integer column.
MAX_STOCK = 2_147_483_647


class ProductCreate(BaseModel):
    """Body for POST /product. category is the id of an existing category."""

    model_config = {"str_strip_whitespace": True}

    name: str = Field(..., min_length=1, max_length=255, description="Product name")
    description: str | None = Field(default=None, description="Optional description")
    price: float = Field(..., ge=0, allow_inf_nan=False, description="Unit price, zero or more")
    stock: int = Field(
        default=0, ge=0, le=MAX_STOCK, description="Units in stock, zero or more"
    )
    category: int = Field(..., ge=1, description="Category id")


class ProductUpdate(BaseModel):
    """Partial update for PUT /product/{id}; a full create body is also accepted."""

    model_config = {"str_strip_whitespace": True}

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    price: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    stock: int | None = Field(default=None, ge=0, le=MAX_STOCK)
    category: int | None = Field(default=None, ge=1)

    @field_validator("name", "price", "stock", "category")
    @classmethod
    def reject_null(cls, v: object) -> object:
        if v is None:
            raise ValueError("may not be null")
        return v


class ProductRead(BaseModel):
    """Product with its resolved category (None when the category was deleted)."""

    model_config = {"from_attributes": True}

    id: int
    name: str
    description: str | None = None
    price: float
    stock: int
    category_id: int
    category: CategoryRead | None = None
    created_at: datetime
    updated_at: datetime
