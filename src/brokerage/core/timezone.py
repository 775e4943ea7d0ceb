"""Calendar helpers in the market timezone."""

from datetime import date, datetime, time, timedelta

import pytz

from brokerage.config.settings import get_settings


def get_market_tz() -> pytz.BaseTzInfo:
    """Return the configured market timezone."""
    return pytz.timezone(get_settings().market_timezone)


def now_local() -> datetime:
    """Return current time in the market timezone."""
    return datetime.now(get_market_tz())


def to_local(dt: datetime) -> datetime:
    """Convert a datetime to the market timezone."""
    tz = get_market_tz()
    if dt.tzinfo is None:
        # Naive values read back from the store are market wall-clock time
        return tz.localize(dt)
    return dt.astimezone(tz)


def start_of_day(day: date) -> datetime:
    """Return midnight at the start of ``day`` in the market timezone."""
    return get_market_tz().localize(datetime.combine(day, time.min))


def start_of_next_day(day: date) -> datetime:
    """Return midnight at the end of ``day`` (start of the following day)."""
    return start_of_day(day + timedelta(days=1))
