"""Calendar helpers for week-based statistics.

Day-of-week numbers follow one convention everywhere in VikFit:
Sunday = 0 ... Saturday = 6, and a week starts on Sunday. Everything here
works on calendar dates, never on instants, so results do not shift across
DST changes or UTC/local boundaries.
"""
from __future__ import annotations

from datetime import date, datetime, timedelta

from vikfit.errors import ParseError

SUNDAY, MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY = range(7)
WEEK_START = SUNDAY
DAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def parse_date(value: date | str) -> date:
    """Accept a ``date`` or a ``YYYY-MM-DD`` string; raise ``ParseError`` otherwise."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ParseError(f"expected YYYY-MM-DD, got {type(value).__name__}")
    parts = value.strip().split("-")
    if len(parts) != 3 or not all(p.isdigit() for p in parts) or len(parts[0]) != 4:
        raise ParseError(f"invalid date {value!r}, expected YYYY-MM-DD")
    try:
        return date(int(parts[0]), int(parts[1]), int(parts[2]))
    except ValueError as exc:
        raise ParseError(f"invalid date {value!r}: {exc}") from exc


def check_day_of_week(day: int) -> int:
    # bool is an int subclass; True/False are not days
    if isinstance(day, bool) or not isinstance(day, int) or not 0 <= day <= 6:
        raise ParseError(f"day of week must be an integer 0-6, got {day!r}")
    return day


def day_of_week(value: date | str) -> int:
    # date.weekday() is Monday=0; shift to Sunday=0
    return (parse_date(value).weekday() + 1) % 7


def day_label(value: date | str) -> str:
    return DAY_LABELS[day_of_week(value)]


def week_anchor(value: date | str, anchor_day: int = WEEK_START) -> date:
    """First day of the week containing ``value``.

    Subtracts ``(day_of_week(value) - anchor_day + 7) % 7`` days, so the
    result always falls on ``anchor_day`` and anchoring twice is a no-op.
    """
    d = parse_date(value)
    check_day_of_week(anchor_day)
    return d - timedelta(days=(day_of_week(d) - anchor_day + 7) % 7)


def week_end(anchor: date | str) -> date:
    return parse_date(anchor) + timedelta(days=6)


def week_dates(anchor: date | str) -> list[date]:
    start = parse_date(anchor)
    return [start + timedelta(days=i) for i in range(7)]


def today() -> date:
    return date.today()
