"""Type-keyed builder dispatch."""

from brokerage.core.exceptions import ValidationError
from brokerage.domain.models import OrderType
from brokerage.services.order_builders.base import OrderBuilder
from brokerage.services.order_builders.limit import LimitOrderBuilder
from brokerage.services.order_builders.market import MarketOrderBuilder

_BUILDERS: dict[OrderType, type[OrderBuilder]] = {
    OrderType.MARKET: MarketOrderBuilder,
    OrderType.LIMIT: LimitOrderBuilder,
}


def create_order_builder(order_type: OrderType) -> OrderBuilder:
    """Return the builder for an order type."""
    builder_cls = _BUILDERS.get(order_type)
    if builder_cls is None:
        raise ValidationError(f"Unknown order type: {order_type}")
    return builder_cls()
