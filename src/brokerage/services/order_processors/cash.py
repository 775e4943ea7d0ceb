"""Processors for deposits and withdrawals (CASH_IN, CASH_OUT)."""

from decimal import Decimal

from brokerage.domain.models import OrderStatus, PositionsMap
from brokerage.services.order_processors.base import OrderProcessor


class CashOrderProcessor(OrderProcessor):
    """Base for cash movements: size is the currency amount, positions are untouched."""

    def process_positions(self, positions: PositionsMap) -> PositionsMap:
        return positions

    def determine_status(self, is_valid: bool) -> OrderStatus:
        # Cash movements are always MARKET and execute immediately
        return OrderStatus.FILLED if is_valid else OrderStatus.REJECTED


class CashInOrderProcessor(CashOrderProcessor):
    """Deposit."""

    def process_cash(self, cash: Decimal) -> Decimal:
        if not self.is_cash_order:
            return cash
        return cash + Decimal(self.order.size)

    def validate_order(self, available_cash: Decimal, positions: PositionsMap) -> bool:
        return self.is_cash_order


class CashOutOrderProcessor(CashOrderProcessor):
    """Withdrawal."""

    def process_cash(self, cash: Decimal) -> Decimal:
        if not self.is_cash_order:
            return cash
        return cash - Decimal(self.order.size)

    def validate_order(self, available_cash: Decimal, positions: PositionsMap) -> bool:
        if not self.is_cash_order:
            return False
        return available_cash >= Decimal(self.order.size)
