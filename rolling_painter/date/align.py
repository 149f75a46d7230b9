from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Sequence

from .errors import DrawingTooWide, UnavoidableFutureDate
from .grid import DAYS_PER_WEEK, sunday_weekday, week_start
from .types import AlignMode, GridPosition

# GitHub's profile contribution graph shows 53 week columns.
GRID_WEEKS = 53


@dataclass(frozen=True)
class Window:
    """The trailing slice of the grid whose rightmost column is the week containing today."""

    origin: date  # Sunday of the leftmost column
    today_row: int
    width: int = GRID_WEEKS

    @property
    def rightmost_col(self) -> int:
        return self.width - 1

    @classmethod
    def for_today(cls, today: date, *, width: int = GRID_WEEKS) -> "Window":
        this_sunday = week_start(today)
        origin = this_sunday.fromordinal(this_sunday.toordinal() - (width - 1) * DAYS_PER_WEEK)
        return cls(origin=origin, today_row=sunday_weekday(today), width=width)


def _candidate_shift(mode: AlignMode, min_col: int, max_col: int, window: Window) -> int:
    spread = max_col - min_col + 1
    if mode == "left":
        return -min_col
    if mode == "right":
        return window.rightmost_col - max_col
    if mode == "center":
        return (window.width - spread) // 2 - min_col
    raise ValueError(f"Unsupported alignment: {mode}")


def _violates_future(positions: Sequence[GridPosition], shift: int, window: Window) -> bool:
    return any(p.column + shift == window.rightmost_col and p.row > window.today_row for p in positions)


def align_shift(positions: Sequence[GridPosition], window: Window, mode: AlignMode = "left") -> int:
    """Pick the single column shift that moves a drawing into the window.

    The clamp keeps max_col + shift <= rightmost_col, so only the drawing's last column
    can sit in the current week. Pulling the drawing one column earlier therefore leaves
    nothing in the rightmost column, which is why a single step is enough to clear any
    future-day conflict.
    """

    if not positions:
        raise ValueError("align_shift needs at least one position")

    min_col = min(p.column for p in positions)
    max_col = max(p.column for p in positions)
    spread = max_col - min_col + 1
    if spread > window.width:
        raise DrawingTooWide(spread, window.width)

    shift = _candidate_shift(mode, min_col, max_col, window)
    shift = max(shift, -min_col)
    shift = min(shift, window.rightmost_col - max_col)

    if _violates_future(positions, shift, window):
        if min_col + shift <= 0:
            raise UnavoidableFutureDate()
        shift -= 1

    return shift


def shift_positions(positions: Sequence[GridPosition], shift: int) -> list[GridPosition]:
    return [p.shifted(shift) for p in positions]
