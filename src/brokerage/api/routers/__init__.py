"""API routers package."""

from brokerage.api.routers.orders import router as orders_router
from brokerage.api.routers.portfolio import router as portfolio_router
from brokerage.api.routers.instruments import router as instruments_router

__all__ = [
    "orders_router",
    "portfolio_router",
    "instruments_router",
]
