"""SQLAlchemy repository implementations."""

from brokerage.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    get_db,
    init_db,
    reset_database,
    Base,
)
from brokerage.repositories.sqlalchemy.instrument_repo import (
    SqlAlchemyInstrumentRepository,
    SqlAlchemyMarketDataRepository,
)
from brokerage.repositories.sqlalchemy.order_repo import SqlAlchemyOrderRepository
from brokerage.repositories.sqlalchemy.snapshot_repo import SqlAlchemySnapshotRepository
from brokerage.repositories.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_db",
    "init_db",
    "reset_database",
    "Base",
    "SqlAlchemyInstrumentRepository",
    "SqlAlchemyMarketDataRepository",
    "SqlAlchemyOrderRepository",
    "SqlAlchemySnapshotRepository",
    "SqlAlchemyUnitOfWork",
]
