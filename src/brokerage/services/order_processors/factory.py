"""Side-keyed processor dispatch."""

from brokerage.core.exceptions import ValidationError
from brokerage.domain.models import Order, OrderSide
from brokerage.services.order_processors.base import OrderProcessor
from brokerage.services.order_processors.cash import CashInOrderProcessor, CashOutOrderProcessor
from brokerage.services.order_processors.trade import BuyOrderProcessor, SellOrderProcessor

_PROCESSORS: dict[OrderSide, type[OrderProcessor]] = {
    OrderSide.BUY: BuyOrderProcessor,
    OrderSide.SELL: SellOrderProcessor,
    OrderSide.CASH_IN: CashInOrderProcessor,
    OrderSide.CASH_OUT: CashOutOrderProcessor,
}


def create_order_processor(order: Order) -> OrderProcessor:
    """Return the processor for the order's side."""
    processor_cls = _PROCESSORS.get(order.side)
    if processor_cls is None:
        raise ValidationError(f"Unknown order side: {order.side}")
    return processor_cls(order)
