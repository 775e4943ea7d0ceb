"""Domain layer - pure business models with no external dependencies."""

from brokerage.domain.models import (
    Instrument,
    MarketData,
    Order,
    Position,
    PositionsMap,
    PortfolioSnapshot,
    OrderSide,
    OrderType,
    OrderStatus,
    InstrumentType,
    PortfolioStrategy,
)

__all__ = [
    "Instrument",
    "MarketData",
    "Order",
    "Position",
    "PositionsMap",
    "PortfolioSnapshot",
    "OrderSide",
    "OrderType",
    "OrderStatus",
    "InstrumentType",
    "PortfolioStrategy",
]
