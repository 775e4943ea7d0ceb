"""Repository protocol definitions (interfaces)."""

from brokerage.repositories.protocols.instrument_repo import (
    InstrumentRepository,
    MarketDataRepository,
)
from brokerage.repositories.protocols.order_repo import OrderRepository
from brokerage.repositories.protocols.snapshot_repo import SnapshotRepository
from brokerage.repositories.protocols.unit_of_work import UnitOfWork

__all__ = [
    "InstrumentRepository",
    "MarketDataRepository",
    "OrderRepository",
    "SnapshotRepository",
    "UnitOfWork",
]
