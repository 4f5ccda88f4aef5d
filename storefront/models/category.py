"""ORM model for product categories."""

from sqlalchemy import Column, Integer, String, Text

from storefront.models.base import Base, TimestampMixin


class Category(TimestampMixin, Base):
    """Catalog category. created_by_* is a snapshot of the admin who created it."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    created_by_username = Column(String(255), nullable=False)
    created_by_role = Column(String(32), nullable=False)

    @property
    def created_by(self) -> dict[str, str]:
        return {"username": self.created_by_username, "role": self.created_by_role}
