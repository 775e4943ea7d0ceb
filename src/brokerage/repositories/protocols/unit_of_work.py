"""Unit of work protocol: transaction boundary plus per-user lock."""

from contextlib import AbstractContextManager
from typing import Protocol


class UnitOfWork(Protocol):
    """Interface for atomic work against the transactional store."""

    def transaction(self) -> AbstractContextManager[None]:
        """Commit on normal exit; roll back and re-raise on any error."""
        ...

    def acquire_user_lock(self, user_id: int) -> None:
        """Block until the user's exclusive lock is held; released at transaction end."""
        ...

    def try_acquire_user_lock(self, user_id: int) -> bool:
        """Acquire the user's lock without waiting where the store allows it."""
        ...
