"""
OrderDesk Backend - Custom Exception Hierarchy
================================================

What:  Defines application-specific exceptions for store and startup failures.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return JSON error responses with the matching HTTP status code.
Who:   Raised by services, the database layer and configuration; caught by
       global handlers or, during startup, by the entry point.

Exception Hierarchy:
    OrderDeskError (base)
    ├── DatabaseError              → 500 Internal Server Error
    ├── DatabaseUnavailableError   → fatal at startup, 500 at request time
    └── ConfigurationError         → fatal at startup

Request body errors are not part of this hierarchy: FastAPI rejects bodies
that fail to deserialize with 422 before any handler runs.
"""

from typing import Any, Dict, Optional


class OrderDeskError(Exception):
    """
    Base exception for all OrderDesk application errors.

    Attributes:
        message:  Error description
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class DatabaseError(OrderDeskError):
    """
    Raised when a query or insert against the store fails.

    What:    Connection lost mid-query, constraint violation (e.g. an order
             referencing a customer that does not exist), syntax error, etc.
    HTTP:    500 Internal Server Error

    The response body is the same for every cause. The underlying driver
    message is logged server-side and kept in `context`.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseUnavailableError(DatabaseError):
    """
    Raised when the connection pool cannot be created or is not initialized.

    When:    The initial connection at startup fails, or a request arrives
             before startup completed.
    Effect:  Startup aborts (no retry). At request time it maps to 500 like
             any other DatabaseError.
    """

    def __init__(
        self,
        message: str = "The database is not reachable",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ConfigurationError(OrderDeskError):
    """Raised when required settings are missing or invalid. Always fatal."""

    def __init__(
        self,
        message: str = "Invalid configuration",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
