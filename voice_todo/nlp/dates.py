"""Calendar arithmetic for spoken date and time phrases.

Resolvers take the regex match of one table rule and the reference point and
return an absolute value. They raise ValueError when the captured values do
not form a real date or clock time; the parser treats that as "no match".
"""

from __future__ import annotations

import calendar
import re
from datetime import UTC, date, datetime, timedelta

from .patterns import MONTHS, NAMED_TIMES, WEEKDAYS

HOLIDAYS = {
    "july_fourth": (7, 4),
    "christmas": (12, 25),
    "new_year": (1, 1),
    "halloween": (10, 31),
}


def to_utc(now: datetime) -> datetime:
    """Aware datetimes are converted to UTC; naive ones are taken to be UTC already."""
    if now.tzinfo is None:
        return now.replace(tzinfo=UTC)
    return now.astimezone(UTC)


def add_months(day: date, months: int) -> date:
    # shift the month field, clamping to the last day of the target month
    index = day.month - 1 + months
    year, month = day.year + index // 12, index % 12 + 1
    last = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last))


def next_weekday(today: date, weekday: int) -> date:
    """Next occurrence strictly after today; the same weekday rolls a full week."""
    return today + timedelta(days=(weekday - today.weekday()) % 7 or 7)


def _weekday(name: str) -> int:
    return WEEKDAYS.index(name.lower())


def _month(name: str) -> int:
    return MONTHS.index(name.lower()) + 1


def _upcoming(today: date, month: int, day: int) -> date:
    # February 29 waits for the next leap year
    for year in range(today.year, today.year + 9):
        try:
            target = date(year, month, day)
        except ValueError:
            continue
        if target >= today:
            return target
    raise ValueError(f"{month}/{day} is not a calendar date")


def _relative(today: date, amount: int, unit: str) -> date:
    unit = unit.lower().rstrip("s")
    if unit == "day":
        return today + timedelta(days=amount)
    if unit == "week":
        return today + timedelta(weeks=amount)
    if unit == "month":
        return add_months(today, amount)
    return add_months(today, amount * 12)


def resolve_date(tag: str, m: re.Match[str], today: date) -> date:
    if tag == "today":
        return today
    if tag == "tomorrow":
        return today + timedelta(days=1)
    if tag == "weekday":
        return next_weekday(today, _weekday(m.group(1)))
    if tag == "next_weekday":
        return next_weekday(today, _weekday(m.group(1))) + timedelta(days=7)
    if tag == "this_weekday":
        # Monday-start week; may land before today
        monday = today - timedelta(days=today.weekday())
        return monday + timedelta(days=_weekday(m.group(1)))
    if tag == "relative":
        return _relative(today, int(m.group(1)), m.group(2))
    if tag == "next_period":
        period = m.group(1).lower()
        if period == "week":
            return today + timedelta(days=7 - today.weekday())
        if period == "month":
            return add_months(today.replace(day=1), 1)
        return date(today.year + 1, 1, 1)
    if tag == "this_period":
        return today
    if tag == "month_day":
        return _upcoming(today, _month(m.group(1)), int(m.group(2)))
    if tag == "day_of_month":
        return _upcoming(today, _month(m.group(2)), int(m.group(1)))
    if tag == "month_day_year":
        return date(int(m.group(3)), _month(m.group(1)), int(m.group(2)))
    if tag == "day_of_month_year":
        return date(int(m.group(3)), _month(m.group(2)), int(m.group(1)))
    if tag in HOLIDAYS:
        month, day = HOLIDAYS[tag]
        if m.group(1):
            return date(int(m.group(1)), month, day)
        return _upcoming(today, month, day)
    if tag in ("date_slash", "date_dash"):
        return date(int(m.group(3)), int(m.group(1)), int(m.group(2)))
    if tag == "iso_date":
        return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    raise ValueError(f"unknown date rule: {tag}")


def to_24h(hour: int, minute: int, meridiem: str | None) -> str:
    if meridiem:
        if not 1 <= hour <= 12:
            raise ValueError(f"{hour} {meridiem} is not a clock hour")
        meridiem = meridiem.lower()
        if meridiem == "am" and hour == 12:
            hour = 0
        elif meridiem == "pm" and hour < 12:
            hour += 12
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise ValueError(f"{hour:02d}:{minute:02d} is not a clock time")
    return f"{hour:02d}:{minute:02d}"


def resolve_time(tag: str, m: re.Match[str], now: datetime) -> str:
    groups = m.groups()
    if tag == "clock":
        meridiem = groups[2] if len(groups) > 2 else None
        return to_24h(int(groups[0]), int(groups[1]), meridiem)
    if tag == "hour":
        return to_24h(int(groups[0]), 0, groups[1])
    if tag == "named":
        return NAMED_TIMES[groups[0].lower()]
    if tag == "relative":
        amount = int(groups[0])
        if groups[1].lower().startswith("hour"):
            later = now + timedelta(hours=amount)
        else:
            later = now + timedelta(minutes=amount)
        return later.strftime("%H:%M")
    raise ValueError(f"unknown time rule: {tag}")
