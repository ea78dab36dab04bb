# Middleware package init
"""
OrderDesk Backend - Middleware Package
========================================

What:  Request correlation and access logging applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → Route Handler

    The order is reversed for responses:
    Response ← [Request ID] ← [Logging] ← Route Handler

    - Request ID is added to response headers
    - Logging captures response status and duration

There is no authentication, rate limiting or CORS layer.
"""
