"""SQLAlchemy implementations of InstrumentRepository and MarketDataRepository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from brokerage.domain.models import Instrument, MarketData
from brokerage.repositories.sqlalchemy.orm_models import InstrumentORM, MarketDataORM


class SqlAlchemyInstrumentRepository:
    """SQLAlchemy-backed instrument directory."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, instrument: Instrument) -> Instrument:
        """Persist a new instrument."""
        orm_instrument = InstrumentORM(
            ticker=instrument.ticker,
            name=instrument.name,
            type=instrument.instrument_type,
        )
        self._db.add(orm_instrument)
        self._db.flush()
        return self.to_domain(orm_instrument)

    def get_by_id(self, instrument_id: int) -> Optional[Instrument]:
        """Retrieve instrument by ID."""
        orm_instrument = self._db.query(InstrumentORM).filter(
            InstrumentORM.id == instrument_id
        ).first()
        return self.to_domain(orm_instrument) if orm_instrument else None

    def get_many(self, instrument_ids: list[int]) -> dict[int, Instrument]:
        """Retrieve instruments by ID; unknown IDs are omitted."""
        if not instrument_ids:
            return {}
        orm_instruments = self._db.query(InstrumentORM).filter(
            InstrumentORM.id.in_(instrument_ids)
        ).all()
        return {i.id: self.to_domain(i) for i in orm_instruments}

    def search(self, query: Optional[str], limit: int, offset: int) -> list[Instrument]:
        """Search by ticker or name substring, ordered by ticker."""
        orm_query = self._filtered(query).order_by(InstrumentORM.ticker)
        return [self.to_domain(i) for i in orm_query.offset(offset).limit(limit).all()]

    def count(self, query: Optional[str]) -> int:
        """Count instruments matching the search query."""
        return self._filtered(query).count()

    def _filtered(self, query: Optional[str]):
        orm_query = self._db.query(InstrumentORM)
        term = (query or "").strip()
        if term:
            pattern = f"%{term}%"
            orm_query = orm_query.filter(
                or_(InstrumentORM.ticker.ilike(pattern), InstrumentORM.name.ilike(pattern))
            )
        return orm_query

    @staticmethod
    def to_domain(orm: InstrumentORM) -> Instrument:
        """Convert ORM model to domain model."""
        return Instrument(
            instrument_id=orm.id,
            ticker=orm.ticker or "",
            name=orm.name or "",
            instrument_type=orm.type,
        )


class SqlAlchemyMarketDataRepository:
    """SQLAlchemy-backed price feed."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, market_data: MarketData) -> MarketData:
        """Persist a daily price record."""
        orm_md = MarketDataORM(
            instrument_id=market_data.instrument_id,
            date=market_data.as_of,
            close=market_data.close,
            previous_close=market_data.previous_close,
            open=market_data.open,
            high=market_data.high,
            low=market_data.low,
        )
        self._db.add(orm_md)
        self._db.flush()
        return self._to_domain(orm_md)

    def get_latest(self, instrument_id: int) -> Optional[MarketData]:
        """Get the most recent price record for an instrument."""
        orm_md = (
            self._db.query(MarketDataORM)
            .filter(MarketDataORM.instrument_id == instrument_id)
            .order_by(MarketDataORM.date.desc(), MarketDataORM.id.desc())
            .first()
        )
        return self._to_domain(orm_md) if orm_md else None

    @staticmethod
    def _to_domain(orm: MarketDataORM) -> MarketData:
        """Convert ORM model to domain model."""
        return MarketData(
            instrument_id=orm.instrument_id,
            as_of=orm.date,
            close=_to_decimal(orm.close),
            previous_close=_to_decimal(orm.previous_close),
            open=_to_decimal(orm.open),
            high=_to_decimal(orm.high),
            low=_to_decimal(orm.low),
        )


def _to_decimal(value) -> Optional[Decimal]:
    return Decimal(str(value)) if value is not None else None
