"""Instrument directory service."""

from typing import Optional

from brokerage.core.exceptions import NotFoundError
from brokerage.domain.models import Instrument
from brokerage.repositories.protocols import InstrumentRepository


class InstrumentService:
    """Lookup and search over the instrument directory."""

    def __init__(self, instrument_repo: InstrumentRepository):
        self._instrument_repo = instrument_repo

    def get_instrument(self, instrument_id: int) -> Instrument:
        """Get instrument by ID; raises NotFoundError if it does not exist."""
        instrument = self._instrument_repo.get_by_id(instrument_id)
        if not instrument:
            raise NotFoundError(f"Instrument with id {instrument_id} not found")
        return instrument

    def search_instruments(
        self,
        query: Optional[str] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Instrument]:
        """Search instruments by ticker or name; empty query lists all."""
        return self._instrument_repo.search(query, limit=limit, offset=offset)

    def count_instruments(self, query: Optional[str] = None) -> int:
        """Count instruments matching the search query."""
        return self._instrument_repo.count(query)
