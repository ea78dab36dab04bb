# Routes package init
"""
OrderDesk Backend - API Routes Package
========================================

What:  HTTP route handlers and the static route table that binds them.
How:   Each handler module defines plain async functions; ROUTES lists every
       (method, path) pair and the handler serving it, and build_router()
       registers the table on a single APIRouter.

Route Table:
    GET   /products    products.list_products
    GET   /customers   customers.list_customers
    GET   /orders      orders.list_orders
    POST  /orders      orders.create_order
    GET   /health      health.health_check

Handlers receive the pooled database session through Depends(get_db_session);
no other state is shared between requests.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from fastapi import APIRouter

from orderdesk.routes import customers, health, orders, products
from orderdesk.schemas.catalog import CustomerResponse, ProductResponse
from orderdesk.schemas.common import ErrorResponse, HealthResponse
from orderdesk.schemas.order import OrderResponse

_SERVER_ERROR = {500: {"description": "Store failure", "model": ErrorResponse}}


@dataclass(frozen=True)
class Route:
    """One entry of the route table."""
    method: str
    path: str
    endpoint: Callable[..., Any]
    response_model: Any
    summary: str
    tags: Tuple[str, ...]
    responses: Optional[Dict[int, Dict[str, Any]]] = None


ROUTES: Tuple[Route, ...] = (
    Route(
        "GET", "/products", products.list_products, List[ProductResponse],
        summary="List all products", tags=("Products",), responses=_SERVER_ERROR,
    ),
    Route(
        "GET", "/customers", customers.list_customers, List[CustomerResponse],
        summary="List all customers", tags=("Customers",), responses=_SERVER_ERROR,
    ),
    Route(
        "GET", "/orders", orders.list_orders, List[OrderResponse],
        summary="List all orders", tags=("Orders",), responses=_SERVER_ERROR,
    ),
    Route(
        "POST", "/orders", orders.create_order, OrderResponse,
        summary="Create an order", tags=("Orders",), responses=_SERVER_ERROR,
    ),
    Route(
        "GET", "/health", health.health_check, HealthResponse,
        summary="Service health check", tags=("Health",),
        responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    ),
)


def build_router(routes: Tuple[Route, ...] = ROUTES) -> APIRouter:
    """Register every entry of the route table on a fresh APIRouter."""
    router = APIRouter()
    for route in routes:
        router.add_api_route(
            route.path,
            route.endpoint,
            methods=[route.method],
            response_model=route.response_model,
            summary=route.summary,
            tags=list(route.tags),
            responses=route.responses,
        )
    return router
