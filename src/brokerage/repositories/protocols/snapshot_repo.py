"""Portfolio snapshot repository protocol."""

from datetime import date
from typing import Protocol, Optional

from brokerage.domain.models import PortfolioSnapshot


class SnapshotRepository(Protocol):
    """Interface for end-of-day portfolio snapshots."""

    def find_latest_before(self, user_id: int, day: date) -> Optional[PortfolioSnapshot]:
        """Get the latest snapshot dated strictly before ``day``."""
        ...

    def find(self, user_id: int, day: date) -> Optional[PortfolioSnapshot]:
        """Get the snapshot for exactly ``day``."""
        ...

    def save(self, snapshot: PortfolioSnapshot) -> PortfolioSnapshot:
        """Persist a new snapshot."""
        ...
