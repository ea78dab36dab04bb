"""
OrderDesk Backend - Product Route Handler
===========================================

What:  Handler for GET /products.
How:   Delegates to ProductService with the request's pooled session.
"""

from typing import List

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from orderdesk.database import get_db_session
from orderdesk.schemas.catalog import ProductResponse
from orderdesk.services.product_service import product_service


async def list_products(
    db: AsyncSession = Depends(get_db_session),
) -> List[ProductResponse]:
    """List every product. Store failures become 500 via the global handler."""
    return await product_service.list_products(db)
