"""Order domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from brokerage.domain.models.enums import OrderSide, OrderType, OrderStatus
from brokerage.domain.models.instrument import Instrument


@dataclass
class Order:
    """
    Ledger order entry (source of truth).

    - size is a unit count for BUY/SELL and a currency amount for CASH_IN/CASH_OUT
    - price is the execution price; always 1 for cash sides
    - FILLED, REJECTED and CANCELLED are terminal; the only transition after
      creation is NEW -> CANCELLED
    """

    user_id: int
    instrument_id: Optional[int]
    side: OrderSide
    order_type: OrderType
    size: int
    price: Decimal
    status: OrderStatus = OrderStatus.NEW
    placed_at: Optional[datetime] = None
    order_id: Optional[int] = None
    instrument: Optional[Instrument] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.side, str):
            self.side = OrderSide(self.side)
        if isinstance(self.order_type, str):
            self.order_type = OrderType(self.order_type)
        if isinstance(self.status, str):
            self.status = OrderStatus(self.status)

    @property
    def notional(self) -> Decimal:
        """Return size x price."""
        return Decimal(self.size) * self.price

    @property
    def is_terminal(self) -> bool:
        """Return True once the order can no longer change status."""
        return self.status != OrderStatus.NEW
