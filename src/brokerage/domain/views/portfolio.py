"""View models for portfolio outputs."""

from dataclasses import dataclass, field
from decimal import Decimal

from brokerage.domain.models import PositionsMap


@dataclass
class PositionView:
    """Valued holding in a single instrument."""

    instrument_id: int
    ticker: str
    name: str
    quantity: int
    market_value: Decimal
    total_return: Decimal  # percent vs. average cost
    daily_return: Decimal  # percent vs. previous close


@dataclass
class Portfolio:
    """
    Computed view of a user's account.

    positions_map is the raw fold result used for order feasibility checks;
    it is not exposed outside the service layer.
    """

    available_cash: Decimal
    positions: list[PositionView] = field(default_factory=list)
    total_value: Decimal = field(default_factory=lambda: Decimal("0"))
    positions_map: PositionsMap = field(default_factory=dict, repr=False)
