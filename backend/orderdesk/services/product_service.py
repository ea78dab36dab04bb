"""
OrderDesk Backend - Product Service
=====================================

What:  Read-all access to the `product` table.
How:   One SELECT per call, rows mapped to ProductResponse.
Who:   Called by the GET /products route handler.
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from orderdesk.exceptions import DatabaseError
from orderdesk.models.product import Product
from orderdesk.schemas.catalog import ProductResponse

logger = logging.getLogger(__name__)


class ProductService:
    """Stateless reader for products."""

    async def list_products(self, db: AsyncSession) -> List[ProductResponse]:
        """
        Return every product in storage order.

        Query:
            SELECT product.id, product.name FROM product

        Raises:
            DatabaseError: The query failed for any reason (→ 500)
        """
        try:
            result = await db.execute(select(Product))
            products = result.scalars().all()
        except Exception as e:
            logger.error("Failed to fetch products: %s", str(e))
            raise DatabaseError(
                message="Could not retrieve products.",
                context={"error_type": type(e).__name__, "original_error": str(e)},
            ) from e

        return [ProductResponse.model_validate(product) for product in products]


# ── Singleton Instance ────────────────────────────────────────────────────
product_service = ProductService()
