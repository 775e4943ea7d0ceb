"""Portfolio engine contract and strategy selection."""

from datetime import datetime
from typing import Callable, Protocol

from brokerage.core.timezone import now_local
from brokerage.domain.models import PortfolioStrategy
from brokerage.domain.views import Portfolio
from brokerage.repositories.protocols import (
    InstrumentRepository,
    OrderRepository,
    SnapshotRepository,
)
from brokerage.services.market_data_service import MarketDataService
from brokerage.services.portfolio.full_replay import FullReplayPortfolioEngine
from brokerage.services.portfolio.snapshot import SnapshotPortfolioEngine


class PortfolioEngine(Protocol):
    """Computes a user's current portfolio from the order ledger."""

    def get_portfolio(self, user_id: int) -> Portfolio:
        ...


def create_portfolio_engine(
    strategy: PortfolioStrategy,
    order_repo: OrderRepository,
    snapshot_repo: SnapshotRepository,
    instrument_repo: InstrumentRepository,
    market_data_service: MarketDataService,
    clock: Callable[[], datetime] = now_local,
) -> PortfolioEngine:
    """Return the engine for the configured valuation strategy."""
    strategy = PortfolioStrategy(strategy)
    if strategy == PortfolioStrategy.FULL_REPLAY:
        return FullReplayPortfolioEngine(order_repo, market_data_service)
    return SnapshotPortfolioEngine(
        order_repo,
        snapshot_repo,
        instrument_repo,
        market_data_service,
        clock=clock,
    )
