"""
OrderDesk Backend - Product SQLAlchemy Model
==============================================

What:  ORM model representing the `product` table.
Who:   Read by ProductService; referenced by Order.product_id.

Products are created outside this service (seed data or other tooling) and
are never written here.
"""

import uuid

from sqlalchemy import Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from orderdesk.database import Base


class Product(Base):
    """A catalog product. Read-only from this service."""

    __tablename__ = "product"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    name: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name='{self.name}')>"
