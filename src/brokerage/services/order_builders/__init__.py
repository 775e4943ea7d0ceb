"""Order builders: type-specific input validation and normalization."""

from brokerage.services.order_builders.base import OrderBuilder, OrderCreate
from brokerage.services.order_builders.market import MarketOrderBuilder
from brokerage.services.order_builders.limit import LimitOrderBuilder
from brokerage.services.order_builders.factory import create_order_builder

__all__ = [
    "OrderBuilder",
    "OrderCreate",
    "MarketOrderBuilder",
    "LimitOrderBuilder",
    "create_order_builder",
]
