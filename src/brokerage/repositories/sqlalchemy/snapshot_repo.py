"""SQLAlchemy implementation of SnapshotRepository."""

from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from brokerage.domain.models import PortfolioSnapshot
from brokerage.repositories.sqlalchemy.orm_models import PortfolioSnapshotORM


class SqlAlchemySnapshotRepository:
    """SQLAlchemy-backed portfolio snapshot repository."""

    def __init__(self, db: Session):
        self._db = db

    def find_latest_before(self, user_id: int, day: date) -> Optional[PortfolioSnapshot]:
        """Get the latest snapshot dated strictly before ``day``."""
        orm_snapshot = (
            self._db.query(PortfolioSnapshotORM)
            .filter(
                PortfolioSnapshotORM.user_id == user_id,
                PortfolioSnapshotORM.snapshot_date < day,
            )
            .order_by(PortfolioSnapshotORM.snapshot_date.desc())
            .first()
        )
        return self._to_domain(orm_snapshot) if orm_snapshot else None

    def find(self, user_id: int, day: date) -> Optional[PortfolioSnapshot]:
        """Get the snapshot for exactly ``day``."""
        orm_snapshot = (
            self._db.query(PortfolioSnapshotORM)
            .filter(
                PortfolioSnapshotORM.user_id == user_id,
                PortfolioSnapshotORM.snapshot_date == day,
            )
            .first()
        )
        return self._to_domain(orm_snapshot) if orm_snapshot else None

    def save(self, snapshot: PortfolioSnapshot) -> PortfolioSnapshot:
        """Persist a new snapshot."""
        orm_snapshot = PortfolioSnapshotORM(
            user_id=snapshot.user_id,
            snapshot_date=snapshot.snapshot_date,
            available_cash=snapshot.available_cash,
            positions_json=snapshot.positions_json,
        )
        self._db.add(orm_snapshot)
        self._db.flush()
        return self._to_domain(orm_snapshot)

    @staticmethod
    def _to_domain(orm: PortfolioSnapshotORM) -> PortfolioSnapshot:
        """Convert ORM model to domain model."""
        return PortfolioSnapshot(
            snapshot_id=orm.id,
            user_id=orm.user_id,
            snapshot_date=orm.snapshot_date,
            available_cash=(
                Decimal(str(orm.available_cash)) if orm.available_cash is not None else Decimal("0")
            ),
            positions_json=orm.positions_json or "{}",
        )
