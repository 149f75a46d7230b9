from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from .date.align import Window, align_shift
from .date.grid import grid_origin, to_grid
from .date.parsers import DEFAULT_SOURCE_YEAR, extract_commit_dates, literal_pattern, literal_to_day
from .date.render import remap_literal, render_all
from .date.types import AlignMode
from .sanitize import strip_setup_commands

ECHO_LINE_RE = re.compile(r"^echo\s+'.*$", re.MULTILINE)


@dataclass(frozen=True)
class RemapResult:
    text: str
    shift: int | None  # None: no anchor dates, text passed through
    anchors: int = 0

    @property
    def passthrough(self) -> bool:
        return self.shift is None


def remap_template(
    text: str,
    *,
    today: date,
    align: AlignMode = "left",
    source_year: int = DEFAULT_SOURCE_YEAR,
    sanitize: bool = True,
    rules_path: Path | None = None,
) -> RemapResult:
    """Remap a github-painter template into the rolling window ending at `today`'s week.

    Commit message dates are the anchors: they decide the shift, and each commit's
    --date is rewritten to its message date. Literals on echo lines are remapped too.
    Any failure raises before text is rewritten.
    """

    if sanitize:
        text = strip_setup_commands(text, rules_path)

    anchors = extract_commit_dates(text, source_year)
    if not anchors:
        return RemapResult(text=text, shift=None)

    source_origin = grid_origin(source_year)
    positions = [to_grid(literal_to_day(s), source_origin) for s in anchors]
    window = Window.for_today(today)
    shift = align_shift(positions, window, align)

    rendered = render_all(anchors, source_origin=source_origin, window_origin=window.origin, shift=shift)
    mapped = dict(zip(anchors, rendered))

    def remap_one(literal: str) -> str:
        # echo lines may carry dates that no commit message uses
        if literal not in mapped:
            mapped[literal] = remap_literal(
                literal, source_origin=source_origin, window_origin=window.origin, shift=shift
            )
        return mapped[literal]

    literal_re = re.compile(literal_pattern(source_year))
    text = ECHO_LINE_RE.sub(lambda m: literal_re.sub(lambda lm: remap_one(lm.group(0)), m.group(0)), text)

    commit_re = re.compile(
        r"(git\s+commit\s+--date=')([^']*)('\s+-m\s+')(" + literal_pattern(source_year) + r")(')"
    )

    def _commit(m: re.Match[str]) -> str:
        new = remap_one(m.group(4))
        return m.group(1) + new + m.group(3) + new + m.group(5)

    text = commit_re.sub(_commit, text)
    return RemapResult(text=text, shift=shift, anchors=len(anchors))
