"""
OrderDesk Backend - Order Request/Response Schemas
====================================================

What:  Wire shapes for GET /orders (OrderResponse) and the POST /orders body
       (NewOrder).
How:   FastAPI validates the request body against NewOrder before the handler
       runs. A body that does not fit is rejected with 422 and never reaches
       the store.

Type coercion rules for NewOrder:
    customer_id / product_id  UUID string in any form uuid.UUID accepts
    quantity                  JSON integer within the 32-bit signed range;
                              strings ("3"), floats (3.0, 3.5) and booleans
                              are rejected
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


class OrderResponse(BaseModel):
    """
    One row of the `"order"` table.

    Example:
        {
            "id": "1b4e28ba-2fa1-11d2-883f-0016d3cca427",
            "customer_id": "6fa459ea-ee8a-3ca4-894e-db77e160355e",
            "product_id": "9a0f1c3e-5d2b-4a8c-b1e7-3f6d2c8a9b0e",
            "quantity": 3,
            "order_date": "2024-01-15T12:00:00.123456"
        }

    order_date carries no UTC offset; the value is UTC.
    """
    id: uuid.UUID = Field(description="Order identifier, generated on insert")
    customer_id: uuid.UUID = Field(description="Ordering customer")
    product_id: uuid.UUID = Field(description="Ordered product")
    quantity: int = Field(description="Number of units ordered")
    order_date: datetime = Field(description="When the order was created (UTC, naive)")

    model_config = {"from_attributes": True}


class NewOrder(BaseModel):
    """
    Request body of POST /orders.

    Not persisted as-is: OrderService adds order_date at insert time. Unknown
    fields (including a caller-supplied order_date or id) are ignored.
    """
    customer_id: uuid.UUID = Field(description="Existing customer id")
    product_id: uuid.UUID = Field(description="Existing product id")
    quantity: int = Field(
        strict=True,
        ge=INT32_MIN,
        le=INT32_MAX,
        description="Number of units (JSON integer)",
    )
