from __future__ import annotations

from datetime import date

from .types import GridPosition

DAYS_PER_WEEK = 7


def sunday_weekday(d: date) -> int:
    """Weekday with Sunday=0 .. Saturday=6 (date.weekday() is Monday=0)."""
    return (d.weekday() + 1) % DAYS_PER_WEEK


def week_start(d: date) -> date:
    """Sunday on/before d."""
    return d.fromordinal(d.toordinal() - sunday_weekday(d))


def grid_origin(year: int) -> date:
    """Column 0 / row 0 of a year's grid: the Sunday on/before January 1."""
    return week_start(date(year, 1, 1))


def to_grid(day: date, origin: date) -> GridPosition:
    # divmod floors, so days before the origin land in negative columns with a valid row.
    column, row = divmod(day.toordinal() - origin.toordinal(), DAYS_PER_WEEK)
    return GridPosition(column=column, row=row)


def from_grid(pos: GridPosition, origin: date) -> date:
    return origin.fromordinal(origin.toordinal() + pos.column * DAYS_PER_WEEK + pos.row)
