"""Order processors: per-side cash/position effects and acceptance rules."""

from brokerage.services.order_processors.base import OrderProcessor, is_cash_instrument
from brokerage.services.order_processors.trade import BuyOrderProcessor, SellOrderProcessor
from brokerage.services.order_processors.cash import CashInOrderProcessor, CashOutOrderProcessor
from brokerage.services.order_processors.factory import create_order_processor

__all__ = [
    "OrderProcessor",
    "is_cash_instrument",
    "BuyOrderProcessor",
    "SellOrderProcessor",
    "CashInOrderProcessor",
    "CashOutOrderProcessor",
    "create_order_processor",
]
