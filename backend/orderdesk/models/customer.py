"""
OrderDesk Backend - Customer SQLAlchemy Model
===============================================

What:  ORM model representing the `customer` table.
Who:   Read by CustomerService; referenced by Order.customer_id.
"""

import uuid

from sqlalchemy import Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from orderdesk.database import Base


class Customer(Base):
    """A customer. Same lifecycle as Product: read-only from here."""

    __tablename__ = "customer"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    name: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Customer(id={self.id}, name='{self.name}')>"
