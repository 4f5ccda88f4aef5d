"""ORM model for roles referenced by users."""

from sqlalchemy import Column, Integer, String

from storefront.models.base import Base


class Role(Base):
    """Named role; names are drawn from storefront.schemas.role.RoleName."""

    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(32), nullable=False, unique=True, index=True)
