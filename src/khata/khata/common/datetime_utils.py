from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_month(value: str) -> tuple[int, int]:
    """Parse YYYY-MM into (year, month)."""
    parsed = datetime.strptime(value, "%Y-%m")
    return parsed.year, parsed.month


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def week_start(value: date | datetime) -> date:
    """Monday of the ISO week containing ``value``.

    Sunday is day 7 of the week that started the previous Monday.
    """
    d = _as_date(value)
    return d - timedelta(days=d.isoweekday() - 1)


def week_end(start: date) -> date:
    return start + timedelta(days=6)


def week_days(start: date) -> list[date]:
    return [start + timedelta(days=i) for i in range(7)]


def current_week(now: datetime | None = None) -> date:
    return week_start(now or now_local())


def month_bounds(month: str) -> tuple[date, date]:
    """First and last day (inclusive) of a YYYY-MM month."""
    year, mon = parse_month(month)
    last_day = calendar.monthrange(year, mon)[1]
    return date(year, mon, 1), date(year, mon, last_day)


def month_key(value: date | datetime) -> str:
    return _as_date(value).strftime("%Y-%m")


def month_label(month: str) -> str:
    first, _ = month_bounds(month)
    return first.strftime("%B %Y")


def format_date(value: date | datetime) -> str:
    """Display form, e.g. ``Mon, 13 Oct 2025``."""
    return _as_date(value).strftime("%a, %d %b %Y")
