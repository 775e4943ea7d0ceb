"""Dependency injection for FastAPI."""

from datetime import datetime
from typing import Callable

from fastapi import Depends
from sqlalchemy.orm import Session

from brokerage.config.settings import get_settings
from brokerage.core.timezone import now_local
from brokerage.repositories.sqlalchemy.database import get_db
from brokerage.repositories.sqlalchemy import (
    SqlAlchemyInstrumentRepository,
    SqlAlchemyMarketDataRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemySnapshotRepository,
    SqlAlchemyUnitOfWork,
)
from brokerage.services import (
    InstrumentService,
    MarketDataService,
    OrderService,
    PortfolioEngine,
    PortfolioService,
    create_portfolio_engine,
)


def get_clock() -> Callable[[], datetime]:
    """Provide the clock used to stamp orders and pick the snapshot day."""
    return now_local


def get_instrument_repo(db: Session = Depends(get_db)) -> SqlAlchemyInstrumentRepository:
    """Provide InstrumentRepository instance."""
    return SqlAlchemyInstrumentRepository(db)


def get_market_data_repo(db: Session = Depends(get_db)) -> SqlAlchemyMarketDataRepository:
    """Provide MarketDataRepository instance."""
    return SqlAlchemyMarketDataRepository(db)


def get_order_repo(db: Session = Depends(get_db)) -> SqlAlchemyOrderRepository:
    """Provide OrderRepository instance."""
    return SqlAlchemyOrderRepository(db)


def get_snapshot_repo(db: Session = Depends(get_db)) -> SqlAlchemySnapshotRepository:
    """Provide SnapshotRepository instance."""
    return SqlAlchemySnapshotRepository(db)


def get_unit_of_work(db: Session = Depends(get_db)) -> SqlAlchemyUnitOfWork:
    """Provide UnitOfWork instance bound to the request session."""
    return SqlAlchemyUnitOfWork(db, lock_timeout_ms=get_settings().lock_timeout_ms)


def get_instrument_service(
    instrument_repo: SqlAlchemyInstrumentRepository = Depends(get_instrument_repo),
) -> InstrumentService:
    """Provide InstrumentService instance."""
    return InstrumentService(instrument_repo=instrument_repo)


def get_market_data_service(
    market_data_repo: SqlAlchemyMarketDataRepository = Depends(get_market_data_repo),
) -> MarketDataService:
    """Provide MarketDataService instance."""
    return MarketDataService(market_data_repo=market_data_repo)


def get_portfolio_engine(
    order_repo: SqlAlchemyOrderRepository = Depends(get_order_repo),
    snapshot_repo: SqlAlchemySnapshotRepository = Depends(get_snapshot_repo),
    instrument_repo: SqlAlchemyInstrumentRepository = Depends(get_instrument_repo),
    market_data_service: MarketDataService = Depends(get_market_data_service),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> PortfolioEngine:
    """Provide the PortfolioEngine for the configured strategy."""
    return create_portfolio_engine(
        get_settings().portfolio_strategy,
        order_repo=order_repo,
        snapshot_repo=snapshot_repo,
        instrument_repo=instrument_repo,
        market_data_service=market_data_service,
        clock=clock,
    )


def get_order_service(
    instrument_service: InstrumentService = Depends(get_instrument_service),
    market_data_service: MarketDataService = Depends(get_market_data_service),
    order_repo: SqlAlchemyOrderRepository = Depends(get_order_repo),
    portfolio_engine: PortfolioEngine = Depends(get_portfolio_engine),
    unit_of_work: SqlAlchemyUnitOfWork = Depends(get_unit_of_work),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> OrderService:
    """Provide OrderService instance."""
    return OrderService(
        instrument_service=instrument_service,
        market_data_service=market_data_service,
        order_repo=order_repo,
        portfolio_engine=portfolio_engine,
        unit_of_work=unit_of_work,
        clock=clock,
    )


def get_portfolio_service(
    portfolio_engine: PortfolioEngine = Depends(get_portfolio_engine),
    unit_of_work: SqlAlchemyUnitOfWork = Depends(get_unit_of_work),
) -> PortfolioService:
    """Provide PortfolioService instance."""
    return PortfolioService(portfolio_engine=portfolio_engine, unit_of_work=unit_of_work)
