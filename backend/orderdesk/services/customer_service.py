"""
OrderDesk Backend - Customer Service
======================================

What:  Read-all access to the `customer` table.
Who:   Called by the GET /customers route handler.
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from orderdesk.exceptions import DatabaseError
from orderdesk.models.customer import Customer
from orderdesk.schemas.catalog import CustomerResponse

logger = logging.getLogger(__name__)


class CustomerService:

    async def list_customers(self, db: AsyncSession) -> List[CustomerResponse]:
        """Return every customer in storage order; DatabaseError on failure."""
        try:
            result = await db.execute(select(Customer))
            customers = result.scalars().all()
        except Exception as e:
            logger.error("Failed to fetch customers: %s", str(e))
            raise DatabaseError(
                message="Could not retrieve customers.",
                context={"error_type": type(e).__name__, "original_error": str(e)},
            ) from e

        return [CustomerResponse.model_validate(customer) for customer in customers]


customer_service = CustomerService()
