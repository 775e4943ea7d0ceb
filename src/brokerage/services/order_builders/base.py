"""Order builder interface and order input."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from brokerage.domain.models import Instrument, Order, OrderSide, OrderType


@dataclass
class OrderCreate:
    """Input data for creating an order."""

    user_id: int
    instrument_id: int
    side: OrderSide
    order_type: OrderType
    size: Optional[int] = None
    amount: Optional[Decimal] = None
    price: Optional[Decimal] = None

    def __post_init__(self) -> None:
        if isinstance(self.side, str):
            self.side = OrderSide(self.side)
        if isinstance(self.order_type, str):
            self.order_type = OrderType(self.order_type)
        if self.amount is not None and not isinstance(self.amount, Decimal):
            self.amount = Decimal(str(self.amount))
        if self.price is not None and not isinstance(self.price, Decimal):
            self.price = Decimal(str(self.price))


class OrderBuilder(ABC):
    """
    Validates type-specific input and produces a normalized NEW order.

    Builders are pure: they never consult the portfolio or decide feasibility.
    """

    @abstractmethod
    def validate_input(self, data: OrderCreate) -> None:
        """Raise ValidationError if the input does not fit this order type."""

    @abstractmethod
    def build_order(
        self,
        data: OrderCreate,
        instrument: Instrument,
        market_price: Optional[Decimal] = None,
    ) -> Order:
        """Return the order with resolved size and price."""
