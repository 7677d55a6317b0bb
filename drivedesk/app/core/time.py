"""Clock helpers shared by models and routers.

Stored timestamps are timezone-aware UTC. Calendar fields (join dates, payment
dates, hire dates, attendance days) default to the current UTC date.
"""

from datetime import UTC, date, datetime


def utc_now() -> datetime:
    return datetime.now(UTC)


def utc_today() -> date:
    return utc_now().date()


def default_date(value: date | None) -> date:
    """Return ``value`` or today's UTC date when it was left out."""
    return value if value is not None else utc_today()
