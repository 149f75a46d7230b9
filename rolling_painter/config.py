from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .date.parsers import DEFAULT_SOURCE_YEAR
from .date.types import ALIGN_MODES, AlignMode


def parse_alignment(value: str | None) -> AlignMode:
    """Validate an alignment selector; empty means the default ('left')."""
    v = (value or "left").strip().lower()
    if v not in ALIGN_MODES:
        raise ValueError(f"Align must be one of: {', '.join(ALIGN_MODES)} (got {value!r})")
    return v  # type: ignore[return-value]


@dataclass(frozen=True)
class RemapConfig:
    align: AlignMode = "left"
    source_year: int = DEFAULT_SOURCE_YEAR
    rules_path: Path | None = None

    @classmethod
    def from_env(cls) -> "RemapConfig":
        """Defaults from ROLLING_PAINTER_* env vars (or a .env file)."""
        load_dotenv()
        align = parse_alignment(os.environ.get("ROLLING_PAINTER_ALIGN", ""))

        year_s = os.environ.get("ROLLING_PAINTER_SOURCE_YEAR", "").strip()
        try:
            source_year = int(year_s) if year_s else DEFAULT_SOURCE_YEAR
        except ValueError:
            raise ValueError(f"ROLLING_PAINTER_SOURCE_YEAR must be a year, got {year_s!r}")

        rules_s = os.environ.get("ROLLING_PAINTER_RULES", "").strip()
        rules_path = Path(rules_s).expanduser() if rules_s else None
        return cls(align=align, source_year=source_year, rules_path=rules_path)
