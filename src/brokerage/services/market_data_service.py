"""Market data service: latest prices per instrument."""

from decimal import Decimal

from brokerage.core.exceptions import NotFoundError
from brokerage.domain.models import MarketData
from brokerage.repositories.protocols import MarketDataRepository


class MarketDataService:
    """Latest closing prices from the price feed."""

    def __init__(self, market_data_repo: MarketDataRepository):
        self._market_data_repo = market_data_repo

    def get_market_price(self, instrument_id: int) -> Decimal:
        """
        Get the latest close for an instrument.

        Raises NotFoundError if no price is available.
        """
        latest = self._market_data_repo.get_latest(instrument_id)
        if not latest or latest.close is None:
            raise NotFoundError(f"Market price not available for instrument {instrument_id}")
        return latest.close

    def get_latest_quotes(self, instrument_ids: list[int]) -> dict[int, MarketData]:
        """
        Get the latest price record for each instrument.

        Instruments without any price record are omitted.
        """
        result: dict[int, MarketData] = {}
        for instrument_id in instrument_ids:
            latest = self._market_data_repo.get_latest(instrument_id)
            if latest:
                result[instrument_id] = latest
        return result
