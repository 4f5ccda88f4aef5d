"""Request/response schemas for category endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class CreatedBy(BaseModel):
    """Snapshot of the admin who created a category."""

    username: str
    role: str


class CategoryCreate(BaseModel):
    """Body for POST /category."""

    model_config = {"str_strip_whitespace": True}

    name: str = Field(..., min_length=1, max_length=255, description="Category name")
    description: str | None = Field(default=None, description="Optional description")


class CategoryUpdate(BaseModel):
    """Partial update for PUT /category/{id}; only the fields sent are applied."""

    model_config = {"str_strip_whitespace": True}

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None

    @field_validator("name")
    @classmethod
    def reject_null_name(cls, v: str | None) -> str | None:
        if v is None:
            raise ValueError("name may not be null")
        return v


class CategoryRead(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    name: str
    description: str | None = None
    created_by: CreatedBy
    created_at: datetime
    updated_at: datetime
