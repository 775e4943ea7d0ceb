"""
Pytest configuration and fixtures for brokerage ledger tests.

This module provides:
- In-memory SQLite database fixtures
- A controllable clock in the market timezone
- Repository, engine and service fixtures
- Factory helpers for instruments, prices and ledger orders
- A FastAPI test client bound to the test database
"""

from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Callable, Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from brokerage.main import app
from brokerage.api.deps import get_clock
from brokerage.repositories.sqlalchemy.database import Base, get_db, reset_database
# Import ORM models to register them with Base before creating tables
from brokerage.repositories.sqlalchemy import orm_models  # noqa: F401
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
    PortfolioService,
    FullReplayPortfolioEngine,
    SnapshotPortfolioEngine,
)
from brokerage.domain.models import (
    Instrument,
    InstrumentType,
    MarketData,
    Order,
    OrderSide,
    OrderStatus,
    OrderType,
)
from brokerage.core.timezone import get_market_tz
from brokerage.config.settings import Settings, reset_settings, set_settings


# =============================================================================
# TIMEZONE HELPERS
# =============================================================================


def market_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create a localized datetime in the market timezone."""
    return get_market_tz().localize(datetime(year, month, day, hour, minute, second))


class FixedClock:
    """
    Deterministic clock for tests.

    Calling the instance returns the current fixed time; ``advance`` moves it.
    """

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, days: int = 0, hours: int = 0, minutes: int = 0) -> datetime:
        self.now = self.now + timedelta(days=days, hours=hours, minutes=minutes)
        return self.now


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic tests."""
    return market_datetime(2024, 6, 15, 14, 30, 0)


@pytest.fixture
def clock(fixed_now) -> FixedClock:
    """Provide a controllable clock starting at fixed_now."""
    return FixedClock(fixed_now)


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    # Reset settings for clean state
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def instrument_repo(test_session) -> SqlAlchemyInstrumentRepository:
    """Provide test InstrumentRepository."""
    return SqlAlchemyInstrumentRepository(test_session)


@pytest.fixture
def market_data_repo(test_session) -> SqlAlchemyMarketDataRepository:
    """Provide test MarketDataRepository."""
    return SqlAlchemyMarketDataRepository(test_session)


@pytest.fixture
def order_repo(test_session) -> SqlAlchemyOrderRepository:
    """Provide test OrderRepository."""
    return SqlAlchemyOrderRepository(test_session)


@pytest.fixture
def snapshot_repo(test_session) -> SqlAlchemySnapshotRepository:
    """Provide test SnapshotRepository."""
    return SqlAlchemySnapshotRepository(test_session)


@pytest.fixture
def unit_of_work(test_session) -> SqlAlchemyUnitOfWork:
    """Provide test UnitOfWork."""
    return SqlAlchemyUnitOfWork(test_session)


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def instrument_service(instrument_repo) -> InstrumentService:
    """Provide test InstrumentService."""
    return InstrumentService(instrument_repo=instrument_repo)


@pytest.fixture
def market_data_service(market_data_repo) -> MarketDataService:
    """Provide test MarketDataService."""
    return MarketDataService(market_data_repo=market_data_repo)


@pytest.fixture
def full_replay_engine(order_repo, market_data_service) -> FullReplayPortfolioEngine:
    """Provide full-replay portfolio engine."""
    return FullReplayPortfolioEngine(order_repo, market_data_service)


@pytest.fixture
def snapshot_engine(
    order_repo,
    snapshot_repo,
    instrument_repo,
    market_data_service,
    clock,
) -> SnapshotPortfolioEngine:
    """Provide snapshot-accelerated portfolio engine on the test clock."""
    return SnapshotPortfolioEngine(
        order_repo,
        snapshot_repo,
        instrument_repo,
        market_data_service,
        clock=clock,
    )


@pytest.fixture
def order_service(
    instrument_service,
    market_data_service,
    order_repo,
    snapshot_engine,
    unit_of_work,
    clock,
) -> OrderService:
    """Provide test OrderService (snapshot strategy)."""
    return OrderService(
        instrument_service=instrument_service,
        market_data_service=market_data_service,
        order_repo=order_repo,
        portfolio_engine=snapshot_engine,
        unit_of_work=unit_of_work,
        clock=clock,
    )


@pytest.fixture
def portfolio_service(snapshot_engine, unit_of_work) -> PortfolioService:
    """Provide test PortfolioService (snapshot strategy)."""
    return PortfolioService(portfolio_engine=snapshot_engine, unit_of_work=unit_of_work)


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def instrument_factory(instrument_repo, test_session) -> Callable[..., Instrument]:
    """Factory for creating committed instruments."""

    def _create_instrument(
        ticker: str,
        name: Optional[str] = None,
        instrument_type: InstrumentType = InstrumentType.ACCIONES,
    ) -> Instrument:
        instrument = instrument_repo.create(
            Instrument(
                instrument_id=0,
                ticker=ticker,
                name=name or f"{ticker} S.A.",
                instrument_type=instrument_type,
            )
        )
        test_session.commit()
        return instrument

    return _create_instrument


@pytest.fixture
def market_data_factory(market_data_repo, test_session, fixed_now) -> Callable[..., MarketData]:
    """Factory for creating committed daily price records."""

    def _create_market_data(
        instrument: Instrument,
        close: Optional[Decimal],
        previous_close: Optional[Decimal] = None,
        as_of: Optional[date] = None,
    ) -> MarketData:
        market_data = market_data_repo.create(
            MarketData(
                instrument_id=instrument.instrument_id,
                as_of=as_of or fixed_now.date(),
                close=close,
                previous_close=previous_close,
            )
        )
        test_session.commit()
        return market_data

    return _create_market_data


@pytest.fixture
def ledger_order_factory(order_repo, test_session) -> Callable[..., Order]:
    """
    Factory for writing orders straight into the ledger.

    Bypasses the orchestrator so tests can build arbitrary histories,
    including ones the platform rules would never accept.
    """

    def _create_order(
        user_id: int,
        instrument: Instrument,
        side: OrderSide,
        size: int,
        price: Decimal = Decimal("1"),
        placed_at: Optional[datetime] = None,
        status: OrderStatus = OrderStatus.FILLED,
        order_type: OrderType = OrderType.MARKET,
    ) -> Order:
        order = order_repo.create(
            Order(
                user_id=user_id,
                instrument_id=instrument.instrument_id,
                side=side,
                order_type=order_type,
                size=size,
                price=price,
                status=status,
                placed_at=placed_at or market_datetime(2024, 6, 15, 11, 0),
                instrument=instrument,
            )
        )
        test_session.commit()
        return order

    return _create_order


# =============================================================================
# PRESET DATA FIXTURES
# =============================================================================


@pytest.fixture
def cash_instrument(instrument_factory) -> Instrument:
    """Create the base-currency instrument."""
    return instrument_factory("ARS", name="Peso", instrument_type=InstrumentType.MONEDA)


@pytest.fixture
def stock(instrument_factory, market_data_factory) -> Instrument:
    """Create an equity priced at 100.50 (previous close 100.00)."""
    instrument = instrument_factory("GGAL", name="Grupo Financiero Galicia")
    market_data_factory(instrument, close=Decimal("100.50"), previous_close=Decimal("100.00"))
    return instrument


@pytest.fixture
def funded_user(cash_instrument, ledger_order_factory) -> int:
    """User 1 with a 10000 deposit placed the day before fixed_now."""
    ledger_order_factory(
        user_id=1,
        instrument=cash_instrument,
        side=OrderSide.CASH_IN,
        size=10000,
        placed_at=market_datetime(2024, 6, 14, 9, 0),
    )
    return 1


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(test_engine, clock, tmp_path) -> TestClient:
    """Provide FastAPI test client with test database and clock."""
    set_settings(Settings(data_dir=tmp_path))
    reset_database()
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: clock
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    reset_database()
    reset_settings()
