# Services package init
"""
OrderDesk Backend - Services Layer
====================================

What:  Query layer between routes (HTTP) and the database (persistence).
How:   Services receive the request's AsyncSession, issue one statement,
       map rows to response schemas and wrap store failures in DatabaseError.

Service Inventory:
    - ProductService:  list_products()
    - CustomerService: list_customers()
    - OrderService:    list_orders(), create_order()

Services hold no state; each module exposes a singleton instance.
"""
