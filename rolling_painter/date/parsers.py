from __future__ import annotations

import re
from datetime import date

from .errors import MalformedDateLiteral
from .types import DateLiteral

DOW = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

DEFAULT_SOURCE_YEAR = 2019

# Outer scan pattern: the shape a JS Date.toString() literal has, for one fixed year.
# Tokens are deliberately loose here; parse_literal() does the strict checks.
_SCAN_TEMPLATE = (
    r"[A-Z][a-z]{{2}}\s[A-Z][a-z]{{2}}\s\d{{2}}\s{year}\s\d{{2}}:\d{{2}}:\d{{2}}\sGMT[+-]\d{{4}}\s\([^)]+\)"
)

LITERAL_RE = re.compile(
    r"^(?P<dow>[A-Z][a-z]{2}) (?P<month>[A-Z][a-z]{2}) (?P<day>\d{2}) (?P<year>\d{4}) "
    r"(?P<hh>\d{2}):(?P<mm>\d{2}):(?P<ss>\d{2}) GMT(?P<offset>[+-]\d{4}) \((?P<zone>[^)]+)\)$"
)


def literal_pattern(year: int = DEFAULT_SOURCE_YEAR) -> str:
    """Regex source matching one date literal of the given year (no groups)."""
    return _SCAN_TEMPLATE.format(year=f"{int(year):04d}")


def commit_message_re(year: int = DEFAULT_SOURCE_YEAR) -> re.Pattern[str]:
    """`git commit --date='...' -m '<literal>'` at the start of a line; group 1 is the literal."""
    return re.compile(
        r"^git\s+commit\s+--date='[^']*'\s+-m\s+'(" + literal_pattern(year) + r")'",
        re.MULTILINE,
    )


def extract_commit_dates(text: str, year: int = DEFAULT_SOURCE_YEAR) -> list[str]:
    """Return commit-message date literals in source order (empty list = nothing to remap)."""
    return [m.group(1) for m in commit_message_re(year).finditer(text)]


def parse_literal(s: str) -> DateLiteral:
    """Strictly parse one literal; clock time and offset are kept but never used for the day."""

    m = LITERAL_RE.match(s.strip())
    if not m:
        raise MalformedDateLiteral(s, "does not match literal grammar")

    dow = m.group("dow")
    if dow not in DOW:
        raise MalformedDateLiteral(s, f"unknown weekday {dow!r}")
    month_token = m.group("month")
    if month_token not in MONTHS:
        raise MalformedDateLiteral(s, f"unknown month {month_token!r}")

    hh, mm, ss = int(m.group("hh")), int(m.group("mm")), int(m.group("ss"))
    if hh > 23 or mm > 59 or ss > 59:
        raise MalformedDateLiteral(s, "clock out of range")
    offset = m.group("offset")
    if int(offset[1:3]) > 23 or int(offset[3:5]) > 59:
        raise MalformedDateLiteral(s, "UTC offset out of range")

    try:
        d = date(int(m.group("year")), MONTHS.index(month_token) + 1, int(m.group("day")))
    except ValueError as e:
        raise MalformedDateLiteral(s, str(e)) from e

    return DateLiteral(
        dow=dow,
        month_token=month_token,
        day=d,
        clock=f"{m.group('hh')}:{m.group('mm')}:{m.group('ss')}",
        utc_offset=offset,
        zone=m.group("zone"),
        source=s,
    )


def literal_to_day(s: str) -> date:
    """The calendar date as written, ignoring clock time and UTC offset."""
    return parse_literal(s).day
