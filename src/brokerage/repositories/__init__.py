"""Repository layer - data access abstractions and implementations."""

from brokerage.repositories.protocols import (
    InstrumentRepository,
    MarketDataRepository,
    OrderRepository,
    SnapshotRepository,
    UnitOfWork,
)

__all__ = [
    "InstrumentRepository",
    "MarketDataRepository",
    "OrderRepository",
    "SnapshotRepository",
    "UnitOfWork",
]
