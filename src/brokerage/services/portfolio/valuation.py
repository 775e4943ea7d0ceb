"""
Shared portfolio valuation utilities.

Both valuation strategies fold FILLED orders through the side processors
and then value the resulting state the same way:

- apply_orders: reducer over (cash, positions)
- check_consistency: negative cash / quantities mean a broken ledger
- value_positions: market value and percentage returns, sorted by ticker
- serialize_positions / deserialize_positions: snapshot payload codec
"""

import json
import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from brokerage.core.exceptions import InconsistentStateError
from brokerage.domain.models import MarketData, Order, Position, PositionsMap
from brokerage.domain.views import Portfolio, PositionView
from brokerage.repositories.protocols import InstrumentRepository
from brokerage.services.market_data_service import MarketDataService
from brokerage.services.order_processors import create_order_processor

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
_PERCENT_PLACES = Decimal("0.01")


def apply_orders(
    orders: Iterable[Order],
    cash: Decimal,
    positions: PositionsMap,
) -> tuple[Decimal, PositionsMap]:
    """
    Fold orders into (cash, positions) and return the new state.

    Orders without a resolved instrument are skipped. Orders on the cash
    instrument only move cash; they never create a position.
    """
    for order in orders:
        if order.instrument is None:
            continue
        processor = create_order_processor(order)
        cash = processor.process_cash(cash)
        if not processor.is_cash_order:
            positions = processor.process_positions(positions)
    return cash, positions


def check_consistency(cash: Decimal, positions: PositionsMap) -> None:
    """Raise InconsistentStateError on negative cash or any negative quantity."""
    if cash < 0:
        logger.error("Negative cash balance detected: %s", cash)
        raise InconsistentStateError(f"Negative cash balance detected ({cash:.2f}).")

    negative = [
        p.instrument.ticker or "Unknown"
        for p in positions.values()
        if p.quantity < 0
    ]
    if negative:
        logger.error("Negative positions detected: %s", negative)
        raise InconsistentStateError(
            "Negative positions detected in the following instruments: "
            f"{', '.join(negative)}."
        )


def percent_change(current: Decimal, base: Decimal) -> Decimal:
    """Return (current - base) / base as a percentage rounded half up to 2 decimals; 0 if base <= 0."""
    if base <= 0:
        return ZERO
    return ((current - base) / base * 100).quantize(_PERCENT_PLACES, rounding=ROUND_HALF_UP)


def value_positions(
    positions: PositionsMap,
    quotes: dict[int, MarketData],
) -> list[PositionView]:
    """Value every held position (quantity > 0) at its latest price."""
    views: list[PositionView] = []
    for instrument_id, position in positions.items():
        if position.quantity <= 0:
            continue

        quote = quotes.get(instrument_id)
        close = quote.close if quote and quote.close is not None else ZERO
        previous_close = (
            quote.previous_close if quote and quote.previous_close is not None else ZERO
        )

        views.append(
            PositionView(
                instrument_id=instrument_id,
                ticker=position.instrument.ticker or "",
                name=position.instrument.name or "",
                quantity=position.quantity,
                market_value=Decimal(position.quantity) * close,
                total_return=percent_change(close, position.average_cost),
                daily_return=percent_change(close, previous_close),
            )
        )

    return sorted(views, key=lambda v: v.ticker)


def build_portfolio(
    cash: Decimal,
    positions: PositionsMap,
    market_data_service: MarketDataService,
) -> Portfolio:
    """Check invariants, then value the state into a Portfolio."""
    check_consistency(cash, positions)

    held_ids = [iid for iid, p in positions.items() if p.quantity > 0]
    quotes = market_data_service.get_latest_quotes(held_ids)
    views = value_positions(positions, quotes)

    total_value = cash + sum((v.market_value for v in views), ZERO)
    return Portfolio(
        available_cash=cash,
        positions=views,
        total_value=total_value,
        positions_map=positions,
    )


def serialize_positions(positions: PositionsMap) -> str:
    """Serialize a positions map to JSON keyed by instrument id."""
    data = {
        str(instrument_id): {
            "quantity": position.quantity,
            "total_cost": str(position.total_cost),
        }
        for instrument_id, position in positions.items()
    }
    return json.dumps(data, sort_keys=True)


def deserialize_positions(
    payload: str,
    instrument_repo: InstrumentRepository,
) -> PositionsMap:
    """
    Rebuild a positions map from its JSON form.

    Instruments are re-resolved from the directory; unknown ids are dropped.
    """
    data = json.loads(payload or "{}")
    if not data:
        return {}

    instruments = instrument_repo.get_many([int(key) for key in data])

    positions: PositionsMap = {}
    for key, entry in data.items():
        instrument_id = int(key)
        instrument = instruments.get(instrument_id)
        if instrument is None:
            logger.warning("Snapshot references unknown instrument %s", instrument_id)
            continue
        positions[instrument_id] = Position(
            instrument=instrument,
            quantity=int(entry["quantity"]),
            total_cost=Decimal(entry["total_cost"]),
        )
    return positions
