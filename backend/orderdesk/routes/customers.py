"""
OrderDesk Backend - Customer Route Handler
============================================

What:  Handler for GET /customers.
"""

from typing import List

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from orderdesk.database import get_db_session
from orderdesk.schemas.catalog import CustomerResponse
from orderdesk.services.customer_service import customer_service


async def list_customers(
    db: AsyncSession = Depends(get_db_session),
) -> List[CustomerResponse]:
    return await customer_service.list_customers(db)
