"""Domain models package."""

from brokerage.domain.models.enums import (
    OrderSide,
    OrderType,
    OrderStatus,
    InstrumentType,
    PortfolioStrategy,
)
from brokerage.domain.models.instrument import Instrument, MarketData
from brokerage.domain.models.order import Order
from brokerage.domain.models.portfolio import Position, PositionsMap, PortfolioSnapshot

__all__ = [
    "OrderSide",
    "OrderType",
    "OrderStatus",
    "InstrumentType",
    "PortfolioStrategy",
    "Instrument",
    "MarketData",
    "Order",
    "Position",
    "PositionsMap",
    "PortfolioSnapshot",
]
