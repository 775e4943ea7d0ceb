"""Portfolio valuation engines."""

from brokerage.services.portfolio.valuation import (
    apply_orders,
    build_portfolio,
    check_consistency,
    deserialize_positions,
    percent_change,
    serialize_positions,
    value_positions,
)
from brokerage.services.portfolio.full_replay import FullReplayPortfolioEngine
from brokerage.services.portfolio.snapshot import SnapshotPortfolioEngine
from brokerage.services.portfolio.engine import PortfolioEngine, create_portfolio_engine

__all__ = [
    "apply_orders",
    "build_portfolio",
    "check_consistency",
    "deserialize_positions",
    "percent_change",
    "serialize_positions",
    "value_positions",
    "FullReplayPortfolioEngine",
    "SnapshotPortfolioEngine",
    "PortfolioEngine",
    "create_portfolio_engine",
]
