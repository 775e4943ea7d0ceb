"""SQLAlchemy implementation of OrderRepository."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session
from sqlalchemy import and_

from brokerage.core.timezone import to_local
from brokerage.domain.models import Order, OrderStatus
from brokerage.repositories.sqlalchemy.orm_models import OrderORM
from brokerage.repositories.sqlalchemy.instrument_repo import SqlAlchemyInstrumentRepository


class SqlAlchemyOrderRepository:
    """SQLAlchemy-backed order repository (append-only apart from cancellation)."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, order: Order) -> Order:
        """Persist a new order and return it with its assigned ID."""
        orm_order = OrderORM(
            user_id=order.user_id,
            instrument_id=order.instrument_id,
            side=order.side,
            order_type=order.order_type,
            size=order.size,
            price=order.price,
            status=order.status,
            placed_at=order.placed_at,
        )
        self._db.add(orm_order)
        self._db.flush()
        self._db.refresh(orm_order)
        return self._to_domain(orm_order)

    def get_by_id(self, order_id: int) -> Optional[Order]:
        """Retrieve order by ID, reloading any copy already held by the session."""
        orm_order = (
            self._db.query(OrderORM)
            .filter(OrderORM.id == order_id)
            .populate_existing()
            .first()
        )
        return self._to_domain(orm_order) if orm_order else None

    def update(self, order: Order) -> Order:
        """Persist a status change on an existing order."""
        orm_order = self._db.query(OrderORM).filter(OrderORM.id == order.order_id).first()
        if not orm_order:
            raise ValueError(f"Order not found: {order.order_id}")

        orm_order.status = order.status

        self._db.flush()
        return self._to_domain(orm_order)

    def list_filled(
        self,
        user_id: int,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> list[Order]:
        """List FILLED orders for a user ordered by placed_at (start inclusive, end exclusive)."""
        conditions = [
            OrderORM.user_id == user_id,
            OrderORM.status == OrderStatus.FILLED,
        ]
        if start is not None:
            conditions.append(OrderORM.placed_at >= start)
        if end is not None:
            conditions.append(OrderORM.placed_at < end)

        query = (
            self._db.query(OrderORM)
            .filter(and_(*conditions))
            .order_by(OrderORM.placed_at, OrderORM.id)
        )
        return [self._to_domain(o) for o in query.all()]

    @staticmethod
    def _to_domain(orm: OrderORM) -> Order:
        """Convert ORM model to domain model."""
        return Order(
            order_id=orm.id,
            user_id=orm.user_id,
            instrument_id=orm.instrument_id,
            side=orm.side,
            order_type=orm.order_type,
            size=int(orm.size),
            price=Decimal(str(orm.price)),
            status=orm.status,
            placed_at=to_local(orm.placed_at) if orm.placed_at else None,
            instrument=(
                SqlAlchemyInstrumentRepository.to_domain(orm.instrument)
                if orm.instrument
                else None
            ),
        )
