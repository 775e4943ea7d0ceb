"""Pydantic schemas for instrument endpoints."""

from typing import Optional

from pydantic import BaseModel

from brokerage.domain.models import InstrumentType


class InstrumentResponse(BaseModel):
    """Response schema for a single instrument."""

    instrument_id: int
    ticker: str
    name: str
    instrument_type: Optional[InstrumentType] = None


class InstrumentSearchResponse(BaseModel):
    """A page of instrument search results."""

    items: list[InstrumentResponse]
    total: int
    limit: int
    offset: int
