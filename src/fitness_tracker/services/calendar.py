"""Calendar grids marking the days that hold data."""

import calendar
from collections.abc import Collection
from dataclasses import dataclass
from datetime import date

MONTHS_PER_YEAR = 12
WEEKDAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

_SUNDAY_FIRST = calendar.Calendar(firstweekday=calendar.SUNDAY)


@dataclass(frozen=True)
class CalendarDay:
    """A day cell in a month grid."""

    date: str
    day: int
    has_data: bool


@dataclass(frozen=True)
class MonthView:
    """A Sunday-first month grid; cells outside the month are None."""

    year: int
    month: int
    title: str
    weeks: list[list[CalendarDay | None]]


def month_matrix(year: int, month: int) -> list[list[date | None]]:
    """Return the weeks of a month, Sunday first, padded with None."""
    return [
        [date(year, month, day) if day else None for day in week]
        for week in _SUNDAY_FIRST.monthdayscalendar(year, month)
    ]


def month_view(year: int, month: int, data_dates: Collection[str]) -> MonthView:
    """Return a month grid with days holding data flagged."""
    weeks = [
        [
            CalendarDay(
                date=day.isoformat(),
                day=day.day,
                has_data=day.isoformat() in data_dates,
            )
            if day
            else None
            for day in week
        ]
        for week in month_matrix(year, month)
    ]
    title = f"{calendar.month_name[month]} {year}"
    return MonthView(year=year, month=month, title=title, weeks=weeks)


def year_view(year: int, data_dates: Collection[str]) -> list[MonthView]:
    """Return the twelve month grids of a year."""
    return [
        month_view(year, month, data_dates)
        for month in range(1, MONTHS_PER_YEAR + 1)
    ]
