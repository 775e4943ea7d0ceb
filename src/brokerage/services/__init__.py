"""Service layer - business logic orchestration."""

from brokerage.services.instrument_service import InstrumentService
from brokerage.services.market_data_service import MarketDataService
from brokerage.services.order_builders import OrderCreate, create_order_builder
from brokerage.services.order_processors import create_order_processor
from brokerage.services.portfolio import (
    FullReplayPortfolioEngine,
    PortfolioEngine,
    SnapshotPortfolioEngine,
    create_portfolio_engine,
)
from brokerage.services.order_service import OrderService
from brokerage.services.portfolio_service import PortfolioService

__all__ = [
    "InstrumentService",
    "MarketDataService",
    "OrderCreate",
    "create_order_builder",
    "create_order_processor",
    "FullReplayPortfolioEngine",
    "PortfolioEngine",
    "SnapshotPortfolioEngine",
    "create_portfolio_engine",
    "OrderService",
    "PortfolioService",
]
