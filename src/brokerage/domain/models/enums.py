"""Enumerations for domain models."""

from enum import Enum


class OrderSide(str, Enum):
    """Economic direction of an order."""

    BUY = "BUY"
    SELL = "SELL"
    CASH_IN = "CASH_IN"  # deposit
    CASH_OUT = "CASH_OUT"  # withdrawal

    @property
    def is_cash_side(self) -> bool:
        """Return True for deposits and withdrawals."""
        return self in (OrderSide.CASH_IN, OrderSide.CASH_OUT)


class OrderType(str, Enum):
    """Execution style of an order."""

    MARKET = "MARKET"  # immediate, at the latest price
    LIMIT = "LIMIT"  # resting, at a caller-specified price


class OrderStatus(str, Enum):
    """Lifecycle status of an order."""

    NEW = "NEW"
    FILLED = "FILLED"
    REJECTED = "REJECTED"
    CANCELLED = "CANCELLED"


class InstrumentType(str, Enum):
    """Instrument categories."""

    ACCIONES = "ACCIONES"  # equities
    MONEDA = "MONEDA"  # currency


class PortfolioStrategy(str, Enum):
    """Portfolio valuation strategies."""

    FULL_REPLAY = "full_replay"
    SNAPSHOT = "snapshot"
