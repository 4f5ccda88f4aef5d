"""ORM model for catalog products."""

from sqlalchemy import Column, Float, Integer, String, Text
from sqlalchemy.orm import relationship

from storefront.models.base import Base, TimestampMixin


class Product(TimestampMixin, Base):
    """
    Catalog product.

    category_id is checked against categories at write time only; there is
    no foreign key, so deleting a category leaves its products in place with
    an orphaned category_id.
    """

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Float, nullable=False)
    stock = Column(Integer, nullable=False, default=0)
    category_id = Column(Integer, nullable=False, index=True)

    category = relationship(
        "Category",
        primaryjoin="foreign(Product.category_id) == Category.id",
        viewonly=True,
        lazy="joined",
    )
