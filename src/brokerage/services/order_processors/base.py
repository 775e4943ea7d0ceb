"""Order processor interface and shared helpers."""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

from brokerage.config.settings import get_settings
from brokerage.domain.models import (
    Instrument,
    InstrumentType,
    Order,
    OrderStatus,
    OrderType,
    PositionsMap,
)


def is_cash_instrument(instrument: Optional[Instrument]) -> bool:
    """Return True if the instrument is the deployment's base currency."""
    if instrument is None:
        return False
    return (
        instrument.instrument_type == InstrumentType.MONEDA
        or instrument.ticker == get_settings().cash_ticker
    )


class OrderProcessor(ABC):
    """
    Economic effect and acceptance rules for one order, keyed by its side.

    process_cash / process_positions are reducer steps: they return the new
    state and never mutate what they were given.
    """

    def __init__(self, order: Order):
        self._order = order

    @property
    def order(self) -> Order:
        return self._order

    @property
    def is_cash_order(self) -> bool:
        """Return True if the order's instrument is the cash instrument."""
        return is_cash_instrument(self._order.instrument)

    @abstractmethod
    def process_cash(self, cash: Decimal) -> Decimal:
        """Return the cash balance after this order."""

    @abstractmethod
    def process_positions(self, positions: PositionsMap) -> PositionsMap:
        """Return the positions map after this order."""

    @abstractmethod
    def validate_order(self, available_cash: Decimal, positions: PositionsMap) -> bool:
        """Return True if the order can execute against the given portfolio state."""

    def determine_status(self, is_valid: bool) -> OrderStatus:
        """Infeasible orders are rejected; MARKET fills immediately, LIMIT rests."""
        if not is_valid:
            return OrderStatus.REJECTED
        if self._order.order_type == OrderType.LIMIT:
            return OrderStatus.NEW
        return OrderStatus.FILLED
