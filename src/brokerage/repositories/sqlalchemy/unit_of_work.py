"""SQLAlchemy unit of work with a transaction-scoped per-user lock."""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import text, update
from sqlalchemy.orm import Session

from brokerage.core.timezone import now_local
from brokerage.repositories.sqlalchemy.orm_models import UserLockORM

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork:
    """
    Transaction boundary over a session, plus the per-user exclusive lock.

    The lock is tied to the transaction: it is taken inside ``transaction()``
    and released when that transaction commits or rolls back.

    PostgreSQL uses ``pg_advisory_xact_lock`` keyed by user id. Other stores
    write the user's row in ``user_locks``; the write lock on that row (or,
    for SQLite, on the database) is held until the transaction ends.
    """

    def __init__(self, db: Session, lock_timeout_ms: Optional[int] = None):
        self._db = db
        self._lock_timeout_ms = lock_timeout_ms

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Commit on normal exit; roll back and re-raise on any error."""
        try:
            yield
            self._db.commit()
        except Exception:
            self._db.rollback()
            raise

    def acquire_user_lock(self, user_id: int) -> None:
        """Block until the user's exclusive lock is held."""
        if self._is_postgres:
            self._apply_lock_timeout()
            self._db.execute(text("SELECT pg_advisory_xact_lock(:key)"), {"key": user_id})
        else:
            self._touch_lock_row(user_id)
        logger.debug("Acquired lock for user %s", user_id)

    def try_acquire_user_lock(self, user_id: int) -> bool:
        """
        Acquire the user's lock without waiting.

        Order and portfolio operations always wait for the lock; this is
        offered to callers outside the package that would rather skip a busy
        user (batch jobs, matching processes).

        Only PostgreSQL supports a non-blocking attempt; other stores fall
        back to the blocking acquisition and report success.
        """
        if self._is_postgres:
            acquired = self._db.execute(
                text("SELECT pg_try_advisory_xact_lock(:key)"), {"key": user_id}
            ).scalar()
            return bool(acquired)
        self._touch_lock_row(user_id)
        return True

    @property
    def _is_postgres(self) -> bool:
        return self._db.get_bind().dialect.name == "postgresql"

    def _apply_lock_timeout(self) -> None:
        if self._lock_timeout_ms is None:
            return
        # SET does not accept bind parameters
        self._db.execute(text(f"SET LOCAL lock_timeout = {int(self._lock_timeout_ms)}"))

    def _touch_lock_row(self, user_id: int) -> None:
        now = now_local()
        result = self._db.execute(
            update(UserLockORM)
            .where(UserLockORM.user_id == user_id)
            .values(acquired_at=now)
        )
        if result.rowcount == 0:
            self._db.add(UserLockORM(user_id=user_id, acquired_at=now))
            self._db.flush()
