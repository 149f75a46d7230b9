from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Literal

AlignMode = Literal["left", "center", "right"]

ALIGN_MODES: tuple[AlignMode, ...] = ("left", "center", "right")


@dataclass(frozen=True)
class GridPosition:
    """A cell in a week/weekday grid: column = week index, row = weekday (Sunday=0)."""

    column: int
    row: int

    def shifted(self, cols: int) -> "GridPosition":
        return GridPosition(column=self.column + cols, row=self.row)


@dataclass(frozen=True)
class DateLiteral:
    """A parsed `Thu Jan 24 2019 00:00:00 GMT-0500 (Eastern Standard Time)` literal."""

    dow: str
    month_token: str
    day: date
    clock: str  # HH:MM:SS as written
    utc_offset: str  # +HHMM / -HHMM as written
    zone: str
    source: str  # the literal text itself
