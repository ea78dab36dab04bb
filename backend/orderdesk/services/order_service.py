"""
OrderDesk Backend - Order Service
===================================

What:  Lists orders and creates new ones.
How:   Each call issues exactly one statement against the store.
Who:   Called by the GET /orders and POST /orders route handlers.

Create flow (POST /orders):
    ┌───────────┐    ┌───────────────────┐    ┌──────────────────────┐
    │ NewOrder  │───▶│ order_date =      │───▶│ INSERT ... RETURNING │
    │ (Route)   │    │ now(UTC), naive   │    │ + COMMIT             │
    └───────────┘    └───────────────────┘    └──────────────────────┘

    The store enforces the foreign keys. A customer_id or product_id that
    references no row fails the INSERT, nothing is written, and the caller
    gets the same generic 500 as for any other store failure.

No retries, no cross-resource checks. Two concurrent creates may commit in
either order; each gets its own uuid4 id.
"""

import logging
from datetime import datetime, timezone
from typing import List

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from orderdesk.exceptions import DatabaseError
from orderdesk.models.order import Order
from orderdesk.schemas.order import NewOrder, OrderResponse

logger = logging.getLogger(__name__)


def utc_now_naive() -> datetime:
    """Current UTC wall-clock time without tzinfo, matching the column type."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class OrderService:
    """
    Business logic layer for order operations.

    Responsibilities:
        - list_orders(): read-all over the order table
        - create_order(): single insert-and-return

    Error Handling Strategy:
        Every store failure is logged with the driver's message and wrapped
        in DatabaseError. Nothing about the cause reaches the client.
    """

    async def list_orders(self, db: AsyncSession) -> List[OrderResponse]:
        """
        Return every order with all five columns, in storage order.

        Query:
            SELECT id, customer_id, product_id, quantity, order_date FROM "order"
        """
        try:
            result = await db.execute(select(Order))
            orders = result.scalars().all()
        except Exception as e:
            logger.error("Failed to fetch orders: %s", str(e))
            raise DatabaseError(
                message="Could not retrieve orders.",
                context={"error_type": type(e).__name__, "original_error": str(e)},
            ) from e

        return [OrderResponse.model_validate(order) for order in orders]

    async def create_order(self, db: AsyncSession, new_order: NewOrder) -> OrderResponse:
        """
        Insert one order and return it as stored.

        Statement:
            INSERT INTO "order" (id, customer_id, product_id, quantity, order_date)
            VALUES (:id, :customer_id, :product_id, :quantity, :order_date)
            RETURNING id, customer_id, product_id, quantity, order_date

        The transaction is committed here so that a commit failure is reported
        as a failed request rather than after the response was built.

        Args:
            db: Async database session
            new_order: Validated request body

        Returns:
            OrderResponse with the generated id and computed order_date

        Raises:
            DatabaseError: Foreign-key violation, lost connection, or any
                other store failure (→ 500)
        """
        stmt = (
            insert(Order)
            .values(
                customer_id=new_order.customer_id,
                product_id=new_order.product_id,
                quantity=new_order.quantity,
                order_date=utc_now_naive(),
            )
            .returning(
                Order.id,
                Order.customer_id,
                Order.product_id,
                Order.quantity,
                Order.order_date,
            )
        )

        try:
            result = await db.execute(stmt)
            row = result.one()
            await db.commit()
        except Exception as e:
            logger.error("Failed to add order: %s", str(e))
            raise DatabaseError(
                message="Could not create the order.",
                context={"error_type": type(e).__name__, "original_error": str(e)},
            ) from e

        order = OrderResponse.model_validate(dict(row._mapping))
        logger.info("Order %s created (quantity=%d)", order.id, order.quantity)
        return order


# ── Singleton Instance ────────────────────────────────────────────────────
order_service = OrderService()
