"""
OrderDesk Backend - Order Route Handlers
==========================================

What:  Handlers for GET /orders (list) and POST /orders (create).
How:   FastAPI deserializes the POST body into NewOrder before the handler
       runs; a body that does not fit is answered with 422 and never reaches
       OrderService.

Status codes:
    GET  /orders  200 list | 500 store failure
    POST /orders  200 created order | 422 malformed body | 500 store failure
"""

import logging
from typing import List

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from orderdesk.database import get_db_session
from orderdesk.schemas.order import NewOrder, OrderResponse
from orderdesk.services.order_service import order_service

logger = logging.getLogger(__name__)


async def list_orders(
    db: AsyncSession = Depends(get_db_session),
) -> List[OrderResponse]:
    """List every order with all five fields."""
    return await order_service.list_orders(db)


async def create_order(
    payload: NewOrder,
    db: AsyncSession = Depends(get_db_session),
) -> OrderResponse:
    """
    Create one order.

    The response is 200 (not 201) with the stored order, including the
    server-assigned id and order_date.
    """
    logger.debug(
        "Creating order: customer=%s product=%s quantity=%d",
        payload.customer_id,
        payload.product_id,
        payload.quantity,
    )
    return await order_service.create_order(db, payload)
