"""Pydantic schemas for portfolio endpoints."""

from decimal import Decimal

from pydantic import BaseModel

from brokerage.domain.views import Portfolio


class PositionResponse(BaseModel):
    """A held position valued at the latest price."""

    instrument_id: int
    ticker: str
    name: str
    quantity: int
    market_value: Decimal
    total_return: Decimal
    daily_return: Decimal


class PortfolioResponse(BaseModel):
    """Current portfolio for one user."""

    user_id: int
    available_cash: Decimal
    total_value: Decimal
    positions: list[PositionResponse]

    @classmethod
    def from_domain(cls, user_id: int, portfolio: Portfolio) -> "PortfolioResponse":
        return cls(
            user_id=user_id,
            available_cash=portfolio.available_cash,
            total_value=portfolio.total_value,
            positions=[
                PositionResponse(
                    instrument_id=p.instrument_id,
                    ticker=p.ticker,
                    name=p.name,
                    quantity=p.quantity,
                    market_value=p.market_value,
                    total_return=p.total_return,
                    daily_return=p.daily_return,
                )
                for p in portfolio.positions
            ],
        )
