"""
OrderDesk Backend - Catalog Response Schemas
==============================================

What:  Wire shapes of the two read-only resources, products and customers.
How:   `from_attributes` lets the services validate ORM rows directly.

Both serialize to:
    {"id": "<uuid>", "name": "<string>"}
"""

import uuid

from pydantic import BaseModel, Field


class ProductResponse(BaseModel):
    """One row of the `product` table. Returned as items of GET /products."""
    id: uuid.UUID = Field(description="Product identifier (UUID)")
    name: str = Field(description="Product name")

    model_config = {"from_attributes": True}


class CustomerResponse(BaseModel):
    """One row of the `customer` table. Returned as items of GET /customers."""
    id: uuid.UUID = Field(description="Customer identifier (UUID)")
    name: str = Field(description="Customer name")

    model_config = {"from_attributes": True}
