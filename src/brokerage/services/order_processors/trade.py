"""Processors for security trades (BUY, SELL)."""

from dataclasses import replace
from decimal import Decimal

from brokerage.domain.models import Position, PositionsMap
from brokerage.services.order_processors.base import OrderProcessor


class BuyOrderProcessor(OrderProcessor):
    """Spends cash and adds to the position at the order price."""

    def process_cash(self, cash: Decimal) -> Decimal:
        if self.is_cash_order:
            return cash
        return cash - self.order.notional

    def process_positions(self, positions: PositionsMap) -> PositionsMap:
        order = self.order
        if order.instrument_id is None or order.instrument is None:
            return positions

        current = positions.get(order.instrument_id) or Position(instrument=order.instrument)
        updated = dict(positions)
        updated[order.instrument_id] = replace(
            current,
            quantity=current.quantity + order.size,
            total_cost=current.total_cost + order.notional,
        )
        return updated

    def validate_order(self, available_cash: Decimal, positions: PositionsMap) -> bool:
        if self.order.instrument is None or self.is_cash_order:
            return False
        return available_cash >= self.order.notional


class SellOrderProcessor(OrderProcessor):
    """Receives cash and reduces the position, keeping its average cost."""

    def process_cash(self, cash: Decimal) -> Decimal:
        if self.is_cash_order:
            return cash
        return cash + self.order.notional

    def process_positions(self, positions: PositionsMap) -> PositionsMap:
        order = self.order
        if order.instrument_id is None or order.instrument is None:
            return positions

        current = positions.get(order.instrument_id)
        if current is None:
            return positions

        remaining = current.quantity - order.size
        updated = dict(positions)
        updated[order.instrument_id] = replace(
            current,
            quantity=remaining,
            total_cost=Decimal(remaining) * current.average_cost,
        )
        return updated

    def validate_order(self, available_cash: Decimal, positions: PositionsMap) -> bool:
        order = self.order
        if order.instrument is None or self.is_cash_order:
            return False
        position = positions.get(order.instrument_id)
        return position is not None and position.quantity >= order.size
