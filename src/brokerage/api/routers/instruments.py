"""Instrument search endpoint."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from brokerage.api.deps import get_instrument_service
from brokerage.api.schemas import InstrumentResponse, InstrumentSearchResponse
from brokerage.services import InstrumentService

router = APIRouter(prefix="/instruments", tags=["instruments"])


@router.get("/search", response_model=InstrumentSearchResponse)
def search_instruments(
    q: Optional[str] = Query(None, description="Ticker or name substring"),
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    service: InstrumentService = Depends(get_instrument_service),
) -> InstrumentSearchResponse:
    """Search instruments by ticker or name, ordered by ticker."""
    instruments = service.search_instruments(q, limit=limit, offset=offset)
    return InstrumentSearchResponse(
        items=[
            InstrumentResponse(
                instrument_id=i.instrument_id,
                ticker=i.ticker,
                name=i.name,
                instrument_type=i.instrument_type,
            )
            for i in instruments
        ],
        total=service.count_instruments(q),
        limit=limit,
        offset=offset,
    )
