"""Instrument and market data domain models."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from brokerage.domain.models.enums import InstrumentType


@dataclass
class Instrument:
    """Tradable instrument (equity) or the account's base currency."""

    instrument_id: int
    ticker: str
    name: str = ""
    instrument_type: Optional[InstrumentType] = None

    def __post_init__(self) -> None:
        if isinstance(self.instrument_type, str):
            self.instrument_type = InstrumentType(self.instrument_type)


@dataclass
class MarketData:
    """Daily price record for an instrument."""

    instrument_id: int
    as_of: date
    close: Optional[Decimal] = None
    previous_close: Optional[Decimal] = None
    open: Optional[Decimal] = None
    high: Optional[Decimal] = None
    low: Optional[Decimal] = None
