"""Position and snapshot models for derived portfolio state."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional

from brokerage.domain.models.instrument import Instrument


@dataclass(frozen=True)
class Position:
    """
    Holding in a single instrument, derived from the order ledger.

    total_cost is the cost basis of the quantity currently held.
    """

    instrument: Instrument
    quantity: int = 0
    total_cost: Decimal = field(default_factory=lambda: Decimal("0"))

    @property
    def average_cost(self) -> Decimal:
        """Return total_cost / quantity (0 for an empty position)."""
        if self.quantity == 0:
            return Decimal("0")
        return self.total_cost / Decimal(self.quantity)


# Keyed by instrument id
PositionsMap = dict[int, Position]


@dataclass
class PortfolioSnapshot:
    """
    End-of-day portfolio rollup for one user.

    IMPORTANT: Written once per (user, date) and never updated.
    positions_json maps instrument id -> {"quantity", "total_cost"}.
    """

    user_id: int
    snapshot_date: date
    available_cash: Decimal
    positions_json: str = "{}"
    snapshot_id: Optional[int] = None
