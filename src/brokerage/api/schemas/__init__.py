"""Pydantic schemas for API request/response."""

from brokerage.api.schemas.order import OrderCreateRequest, OrderResponse
from brokerage.api.schemas.portfolio import PortfolioResponse, PositionResponse
from brokerage.api.schemas.instrument import InstrumentResponse, InstrumentSearchResponse

__all__ = [
    "OrderCreateRequest",
    "OrderResponse",
    "PortfolioResponse",
    "PositionResponse",
    "InstrumentResponse",
    "InstrumentSearchResponse",
]
