"""
OrderDesk Backend - FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Served by uvicorn (`python -m orderdesk` or `uvicorn orderdesk.main:app`).
When:  Once at server startup; the returned app handles all subsequent requests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌─────────────────┐               │
    │  │  Request ID  │→│  Access logging │               │
    │  └──────────────┘ └─────────────────┘               │
    │                                                     │
    │  Route table:                                       │
    │  GET /products  GET /customers  GET /orders         │
    │  POST /orders   GET /health                         │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ DatabaseError→500 │ OrderDeskError→500 │ *→500│   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Validate configuration (DATABASE_URL must be set)
    3. Create the connection pool and prove the store is reachable
    Any failure here is logged and re-raised; the ASGI server then aborts.

    Shutdown:
    1. Dispose database engine (close all connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from orderdesk import __version__
from orderdesk.config import settings
from orderdesk.database import dispose_engine, init_engine
from orderdesk.exceptions import DatabaseError, OrderDeskError
from orderdesk.middleware.logging import RequestLoggingMiddleware
from orderdesk.middleware.request_id import RequestIDMiddleware, request_id_var
from orderdesk.routes import build_router

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output: the process's error stream (stderr).
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )

    # Access lines come from RequestLoggingMiddleware instead
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    if settings.log_level != "DEBUG":
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Run startup before the first request and cleanup after the last one.

    Startup is all-or-nothing: a missing DATABASE_URL or an unreachable store
    aborts the process. There is no retry.
    """
    setup_logging()
    logger.info("OrderDesk Backend %s starting up...", __version__)

    try:
        settings.validate_required()
        await init_engine(settings.database_url)
    except OrderDeskError as e:
        logger.critical("Startup failed: %s", e.message)
        raise

    logger.info(
        "Server is running on http://%s:%d", settings.backend_host, settings.backend_port
    )

    yield

    logger.info("OrderDesk Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers.

    Handler hierarchy:
        DatabaseError          → 500 (includes DatabaseUnavailableError)
        OrderDeskError (base)  → 500
        Exception (fallback)   → 500

    Every store failure gets the same body; the cause is only logged.
    Malformed request bodies never get here: FastAPI answers them with 422.
    """

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        """Database error: generic message to user, details logged server-side."""
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": "An internal error occurred. Please try again later.",
                "request_id": rid,
            },
        )

    @app.exception_handler(OrderDeskError)
    async def handle_app_error(request: Request, exc: OrderDeskError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": "An internal error occurred. Please try again later.",
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: stack trace is logged, never returned."""
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="OrderDesk API",
        description="Read products, customers and orders, and place new orders.",
        version=__version__,
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition:
    # RequestID runs first, then Logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(build_router())

    return app


# uvicorn expects `orderdesk.main:app` to be importable
app = create_app()
