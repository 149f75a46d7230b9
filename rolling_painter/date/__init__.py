"""Date literal parsing and week/weekday grid mapping.

Core philosophy: a drawing is a set of (week column, weekday row) points.
Everything else (literals, templates) is an adapter around that grid.
"""

from .align import Window, align_shift, shift_positions
from .errors import DrawingTooWide, MalformedDateLiteral, RemapError, UnavoidableFutureDate
from .grid import from_grid, grid_origin, to_grid
from .parsers import DEFAULT_SOURCE_YEAR, extract_commit_dates, literal_to_day, parse_literal
from .render import format_literal, remap_literal, render_all
from .types import AlignMode, DateLiteral, GridPosition
