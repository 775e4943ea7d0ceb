"""Instrument and market data repository protocols."""

from typing import Protocol, Optional

from brokerage.domain.models import Instrument, MarketData


class InstrumentRepository(Protocol):
    """Interface for the instrument directory."""

    def create(self, instrument: Instrument) -> Instrument:
        """Persist a new instrument."""
        ...

    def get_by_id(self, instrument_id: int) -> Optional[Instrument]:
        """Retrieve instrument by ID."""
        ...

    def get_many(self, instrument_ids: list[int]) -> dict[int, Instrument]:
        """Retrieve instruments by ID; unknown IDs are omitted."""
        ...

    def search(self, query: Optional[str], limit: int, offset: int) -> list[Instrument]:
        """Search by ticker or name substring, ordered by ticker."""
        ...

    def count(self, query: Optional[str]) -> int:
        """Count instruments matching the search query."""
        ...


class MarketDataRepository(Protocol):
    """Interface for the price feed."""

    def create(self, market_data: MarketData) -> MarketData:
        """Persist a daily price record."""
        ...

    def get_latest(self, instrument_id: int) -> Optional[MarketData]:
        """Get the most recent price record for an instrument."""
        ...
