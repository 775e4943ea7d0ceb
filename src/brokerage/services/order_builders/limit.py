"""LIMIT order builder."""

from decimal import Decimal
from typing import Optional

from brokerage.core.exceptions import ValidationError
from brokerage.domain.models import Instrument, Order
from brokerage.services.order_builders.base import OrderBuilder, OrderCreate


class LimitOrderBuilder(OrderBuilder):
    """Rests at the caller's price; the market price is never consulted."""

    def validate_input(self, data: OrderCreate) -> None:
        if data.price is None:
            raise ValidationError("Price is required for LIMIT orders")
        if data.size is None:
            raise ValidationError("Size is required for LIMIT orders")

    def build_order(
        self,
        data: OrderCreate,
        instrument: Instrument,
        market_price: Optional[Decimal] = None,
    ) -> Order:
        return Order(
            user_id=data.user_id,
            instrument_id=data.instrument_id,
            side=data.side,
            order_type=data.order_type,
            size=data.size,
            price=data.price,
            instrument=instrument,
        )
