"""SQLAlchemy ORM model definitions."""

from decimal import Decimal

from sqlalchemy import (
    Column,
    Integer,
    String,
    Date,
    DateTime,
    Text,
    ForeignKey,
    Numeric,
    UniqueConstraint,
    Enum as SqlEnum,
)
from sqlalchemy.orm import relationship

from brokerage.repositories.sqlalchemy.database import Base
from brokerage.domain.models.enums import (
    OrderSide,
    OrderType,
    OrderStatus,
    InstrumentType,
)


class InstrumentORM(Base):
    """SQLAlchemy model for Instrument."""

    __tablename__ = "instruments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    ticker = Column(String(10), nullable=True, index=True)
    name = Column(String(255), nullable=True, index=True)
    type = Column(SqlEnum(InstrumentType), nullable=True)


class MarketDataORM(Base):
    """SQLAlchemy model for MarketData (one row per instrument per day)."""

    __tablename__ = "marketdata"

    id = Column(Integer, primary_key=True, autoincrement=True)
    instrument_id = Column(Integer, ForeignKey("instruments.id"), nullable=False, index=True)
    high = Column(Numeric(precision=18, scale=4), nullable=True)
    low = Column(Numeric(precision=18, scale=4), nullable=True)
    open = Column(Numeric(precision=18, scale=4), nullable=True)
    close = Column(Numeric(precision=18, scale=4), nullable=True)
    previous_close = Column(Numeric(precision=18, scale=4), nullable=True)
    date = Column(Date, nullable=False)

    instrument = relationship("InstrumentORM")


class OrderORM(Base):
    """SQLAlchemy model for Order (ledger entry)."""

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False, index=True)
    instrument_id = Column(Integer, ForeignKey("instruments.id"), nullable=True)
    side = Column(SqlEnum(OrderSide), nullable=False)
    order_type = Column(SqlEnum(OrderType), nullable=False)
    size = Column(Integer, nullable=False)
    price = Column(Numeric(precision=18, scale=4), nullable=False)
    status = Column(SqlEnum(OrderStatus), nullable=False, index=True)
    placed_at = Column(DateTime(timezone=True), nullable=False, index=True)

    instrument = relationship("InstrumentORM", lazy="joined")


class PortfolioSnapshotORM(Base):
    """SQLAlchemy model for PortfolioSnapshot (end-of-day rollup)."""

    __tablename__ = "portfolio_snapshots"
    __table_args__ = (
        UniqueConstraint("user_id", "snapshot_date", name="uq_snapshot_user_date"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False)
    snapshot_date = Column(Date, nullable=False)
    available_cash = Column(Numeric(precision=18, scale=4), default=Decimal("0"))
    positions_json = Column(Text, nullable=False, default="{}")


class UserLockORM(Base):
    """Lock target row per user, for stores without advisory locks."""

    __tablename__ = "user_locks"

    user_id = Column(Integer, primary_key=True, autoincrement=False)
    acquired_at = Column(DateTime(timezone=True), nullable=True)
