"""
OrderDesk Backend - Order SQLAlchemy Model
============================================

What:  ORM model representing the `"order"` table.
How:   `order` is a reserved word in SQL; SQLAlchemy quotes the table name
       in every statement it emits.
Who:   Read and inserted by OrderService.

Table Design:
    - id: UUID generated per insert (uuid4 default on the column). A
      PostgreSQL schema may additionally carry gen_random_uuid() as a
      server default; the value sent by the insert takes precedence.
    - customer_id / product_id: foreign keys. Referential integrity is
      enforced by the store; a dangling reference fails the INSERT.
    - quantity: 32-bit INTEGER.
    - order_date: TIMESTAMP WITHOUT TIME ZONE holding a UTC wall-clock value.
      It is computed by OrderService at insert time, never by the caller.

Orders are never updated or deleted by this service.
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from orderdesk.database import Base


class Order(Base):
    """A customer's order for a quantity of one product."""

    __tablename__ = "order"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    customer_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("customer.id"),
        nullable=False,
    )

    product_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("product.id"),
        nullable=False,
    )

    quantity: Mapped[int] = mapped_column(Integer, nullable=False)

    # Naive timestamp; the value is always UTC
    order_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        nullable=False,
    )

    def __repr__(self) -> str:
        return (
            f"<Order(id={self.id}, customer_id={self.customer_id}, "
            f"product_id={self.product_id}, quantity={self.quantity})>"
        )
