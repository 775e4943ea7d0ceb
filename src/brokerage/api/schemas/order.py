"""Pydantic schemas for order endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from brokerage.domain.models import Order, OrderSide, OrderStatus, OrderType


class OrderCreateRequest(BaseModel):
    """Request schema for submitting an order."""

    model_config = {"populate_by_name": True}

    user_id: int = Field(..., description="Owner of the order")
    instrument_id: int = Field(..., description="Instrument to trade")
    side: OrderSide = Field(..., description="BUY, SELL, CASH_IN or CASH_OUT")
    order_type: OrderType = Field(..., alias="type", description="MARKET or LIMIT")
    size: Optional[int] = Field(
        default=None,
        gt=0,
        description="Units for BUY/SELL, currency amount for cash sides",
    )
    amount: Optional[Decimal] = Field(
        default=None,
        gt=0,
        description="Currency amount to convert into units (MARKET only)",
    )
    price: Optional[Decimal] = Field(
        default=None,
        gt=0,
        description="Limit price (required for LIMIT)",
    )

    @model_validator(mode="after")
    def check_quantity_and_price(self) -> "OrderCreateRequest":
        if self.size is None and self.amount is None:
            raise ValueError("Either size or amount must be provided")
        if self.order_type == OrderType.LIMIT and self.price is None:
            raise ValueError("Price is required for LIMIT orders")
        if self.amount is not None and self.order_type != OrderType.MARKET:
            raise ValueError("Amount is only supported for MARKET orders")
        return self


class OrderResponse(BaseModel):
    """Response schema for a single order."""

    order_id: int
    user_id: int
    instrument_id: Optional[int] = None
    side: OrderSide
    order_type: OrderType
    size: int
    price: Decimal
    status: OrderStatus
    placed_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, order: Order) -> "OrderResponse":
        return cls(
            order_id=order.order_id,
            user_id=order.user_id,
            instrument_id=order.instrument_id,
            side=order.side,
            order_type=order.order_type,
            size=order.size,
            price=order.price,
            status=order.status,
            placed_at=order.placed_at,
        )
