from __future__ import annotations

from datetime import date

from .grid import from_grid, sunday_weekday, to_grid
from .parsers import DOW, MONTHS, literal_to_day

# Midday UTC keeps the rendered date stable however a local clock/offset is applied later.
CANONICAL_TIME = "12:00:00 GMT+0000 (UTC)"


def format_literal(d: date) -> str:
    """`Sat Mar 02 2024 12:00:00 GMT+0000 (UTC)`; names and padding come from d itself."""
    return f"{DOW[sunday_weekday(d)]} {MONTHS[d.month - 1]} {d.day:02d} {d.year:04d} {CANONICAL_TIME}"


def remap_literal(literal: str, *, source_origin: date, window_origin: date, shift: int) -> str:
    """Move one literal from the source grid to the window grid, keeping its weekday row."""
    pos = to_grid(literal_to_day(literal), source_origin)
    return format_literal(from_grid(pos.shifted(shift), window_origin))


def render_all(literals: list[str], *, source_origin: date, window_origin: date, shift: int) -> list[str]:
    """Replacement text for each literal, in the same order (duplicates map identically)."""
    cache: dict[str, str] = {}
    out: list[str] = []
    for lit in literals:
        if lit not in cache:
            cache[lit] = remap_literal(lit, source_origin=source_origin, window_origin=window_origin, shift=shift)
        out.append(cache[lit])
    return out
