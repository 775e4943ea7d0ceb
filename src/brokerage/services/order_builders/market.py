"""MARKET order builder."""

from decimal import Decimal, ROUND_FLOOR
from typing import Optional

from brokerage.core.exceptions import ValidationError
from brokerage.domain.models import Instrument, Order
from brokerage.services.order_builders.base import OrderBuilder, OrderCreate

CASH_PRICE = Decimal("1")


class MarketOrderBuilder(OrderBuilder):
    """
    Executes at the latest market price.

    Quantity comes from an explicit size or from a currency amount:
    - cash sides: size = floor(amount)
    - security sides: size = floor(amount / market_price)
    """

    def validate_input(self, data: OrderCreate) -> None:
        if data.size is None and data.amount is None:
            raise ValidationError("Either size or amount must be provided")
        if data.size is not None and data.amount is not None:
            raise ValidationError("Provide either size or amount, not both")

    def build_order(
        self,
        data: OrderCreate,
        instrument: Instrument,
        market_price: Optional[Decimal] = None,
    ) -> Order:
        is_cash_side = data.side.is_cash_side
        if not is_cash_side and market_price is None:
            raise ValidationError("Market price is required for MARKET orders")
        price = CASH_PRICE if is_cash_side else market_price

        if data.amount is not None:
            units = data.amount if is_cash_side else data.amount / price
            size = int(units.to_integral_value(rounding=ROUND_FLOOR))
            if size <= 0:
                raise ValidationError("Amount is too small to acquire at least one unit")
        else:
            size = data.size

        return Order(
            user_id=data.user_id,
            instrument_id=data.instrument_id,
            side=data.side,
            order_type=data.order_type,
            size=size,
            price=price,
            instrument=instrument,
        )
