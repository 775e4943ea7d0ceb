"""Snapshot-accelerated portfolio valuation."""

import logging
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Callable

from brokerage.core.timezone import now_local, start_of_day, start_of_next_day, to_local
from brokerage.domain.models import PortfolioSnapshot, PositionsMap
from brokerage.domain.views import Portfolio
from brokerage.repositories.protocols import (
    InstrumentRepository,
    OrderRepository,
    SnapshotRepository,
)
from brokerage.services.market_data_service import MarketDataService
from brokerage.services.portfolio.valuation import (
    ZERO,
    apply_orders,
    build_portfolio,
    deserialize_positions,
    serialize_positions,
)

logger = logging.getLogger(__name__)


class SnapshotPortfolioEngine:
    """
    Computes the portfolio from the latest end-of-day snapshot plus the
    FILLED orders placed after it.

    As a side effect, persists yesterday's closing state the first time it
    is needed, so later reads only replay the current day.
    """

    def __init__(
        self,
        order_repo: OrderRepository,
        snapshot_repo: SnapshotRepository,
        instrument_repo: InstrumentRepository,
        market_data_service: MarketDataService,
        clock: Callable[[], datetime] = now_local,
    ):
        self._order_repo = order_repo
        self._snapshot_repo = snapshot_repo
        self._instrument_repo = instrument_repo
        self._market_data_service = market_data_service
        self._clock = clock

    def get_portfolio(self, user_id: int) -> Portfolio:
        today = to_local(self._clock()).date()
        yesterday = today - timedelta(days=1)
        today_start = start_of_day(today)

        cash, positions, had_orders, has_prior = self._closing_state(user_id, today)

        todays_orders = self._order_repo.list_filled(user_id, start=today_start)
        live_cash, live_positions = apply_orders(todays_orders, cash, positions)

        if self._snapshot_repo.find(user_id, yesterday) is None and (
            not has_prior or had_orders
        ):
            self._save_snapshot(user_id, yesterday, cash, positions)

        return build_portfolio(live_cash, live_positions, self._market_data_service)

    def _closing_state(
        self, user_id: int, today: date
    ) -> tuple[Decimal, PositionsMap, bool, bool]:
        """
        Return yesterday's closing (cash, positions), whether any orders were
        replayed to get there, and whether a prior snapshot was used.
        """
        today_start = start_of_day(today)
        snapshot = self._snapshot_repo.find_latest_before(user_id, today)

        if snapshot is None:
            orders = self._order_repo.list_filled(user_id, end=today_start)
            cash, positions = apply_orders(orders, ZERO, {})
            return cash, positions, True, False

        positions = deserialize_positions(snapshot.positions_json, self._instrument_repo)
        orders = self._order_repo.list_filled(
            user_id,
            start=start_of_next_day(snapshot.snapshot_date),
            end=today_start,
        )
        cash, positions = apply_orders(orders, snapshot.available_cash, positions)
        return cash, positions, len(orders) > 0, True

    def _save_snapshot(
        self,
        user_id: int,
        day: date,
        cash: Decimal,
        positions: PositionsMap,
    ) -> None:
        self._snapshot_repo.save(
            PortfolioSnapshot(
                user_id=user_id,
                snapshot_date=day,
                available_cash=cash,
                positions_json=serialize_positions(positions),
            )
        )
        logger.info("Saved portfolio snapshot for user %s on %s", user_id, day)
