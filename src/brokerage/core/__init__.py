"""Core utilities and shared functionality."""

from brokerage.core.timezone import (
    get_market_tz,
    now_local,
    to_local,
    start_of_day,
    start_of_next_day,
)
from brokerage.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    InconsistentStateError,
)

__all__ = [
    "get_market_tz",
    "now_local",
    "to_local",
    "start_of_day",
    "start_of_next_day",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "InconsistentStateError",
]
