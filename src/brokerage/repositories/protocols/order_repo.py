"""Order repository protocol."""

from datetime import datetime
from typing import Protocol, Optional

from brokerage.domain.models import Order


class OrderRepository(Protocol):
    """Interface for order (ledger) data access."""

    def create(self, order: Order) -> Order:
        """Persist a new order and return it with its assigned ID."""
        ...

    def get_by_id(self, order_id: int) -> Optional[Order]:
        """Retrieve order by ID."""
        ...

    def update(self, order: Order) -> Order:
        """Persist a status change on an existing order."""
        ...

    def list_filled(
        self,
        user_id: int,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> list[Order]:
        """
        List FILLED orders for a user ordered by placed_at.

        start is inclusive, end is exclusive.
        """
        ...
