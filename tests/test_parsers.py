from __future__ import annotations

from datetime import date

import pytest

from rolling_painter.date.errors import MalformedDateLiteral
from rolling_painter.date.grid import grid_origin, to_grid
from rolling_painter.date.parsers import extract_commit_dates, parse_literal
from rolling_painter.date.render import format_literal, render_all

EDT = "Mon Mar 11 2019 00:00:00 GMT-0400 (Eastern Daylight Time)"


def test_parse_literal_keeps_calendar_date() -> None:
    lit = parse_literal(EDT)
    assert lit.day == date(2019, 3, 11)
    assert lit.dow == "Mon"
    assert lit.clock == "00:00:00"
    assert lit.utc_offset == "-0400"
    assert lit.zone == "Eastern Daylight Time"


def test_parse_ignores_clock_and_offset_for_the_day() -> None:
    late = parse_literal("Mon Mar 11 2019 23:59:59 GMT+1400 (Line Islands Time)")
    assert late.day == date(2019, 3, 11)


@pytest.mark.parametrize(
    "s",
    [
        "Mon Foo 11 2019 00:00:00 GMT-0400 (EDT)",
        "Xyz Mar 11 2019 00:00:00 GMT-0400 (EDT)",
        "Fri Feb 30 2019 00:00:00 GMT+0000 (UTC)",
        "Mon Mar 11 2019 24:00:00 GMT+0000 (UTC)",
        "Mon Mar 11 2019 00:00:00 GMT+0000",
        "2019-03-11",
    ],
)
def test_parse_literal_rejects_malformed(s: str) -> None:
    with pytest.raises(MalformedDateLiteral):
        parse_literal(s)


def test_extract_commit_dates_in_source_order() -> None:
    text = (
        f"echo '{EDT}' > foo.txt\n"
        "git add .\n"
        f"git commit --date='{EDT}' -m '{EDT}'\n"
        "git commit --date='whatever' -m 'Sat Jan 05 2019 00:00:00 GMT-0500 (Eastern Standard Time)'\n"
        "git commit --date='x' -m 'Sat Jan 05 2020 00:00:00 GMT-0500 (Eastern Standard Time)'\n"
    )
    assert extract_commit_dates(text) == [
        EDT,
        "Sat Jan 05 2019 00:00:00 GMT-0500 (Eastern Standard Time)",
    ]
    assert extract_commit_dates(text, 2020) == ["Sat Jan 05 2020 00:00:00 GMT-0500 (Eastern Standard Time)"]


def test_extract_commit_dates_none() -> None:
    assert extract_commit_dates("echo hi\ngit push\n") == []


def test_format_literal_is_noon_utc() -> None:
    assert format_literal(date(2024, 2, 12)) == "Mon Feb 12 2024 12:00:00 GMT+0000 (UTC)"
    assert format_literal(date(2024, 3, 1)) == "Fri Mar 01 2024 12:00:00 GMT+0000 (UTC)"


def test_rendered_literal_parses_back_to_same_position() -> None:
    o = grid_origin(2023)
    d = date(2023, 1, 1)
    for _ in range(400):
        lit = parse_literal(format_literal(d))
        assert lit.day == d
        assert to_grid(lit.day, o) == to_grid(d, o)
        d = d.fromordinal(d.toordinal() + 1)


def test_render_all_recomputes_names_and_maps_duplicates_alike() -> None:
    window_origin = date(2023, 3, 5)
    out = render_all(
        [EDT, "Fri Mar 29 2019 00:00:00 GMT-0400 (EDT)", EDT],
        source_origin=grid_origin(2019),
        window_origin=window_origin,
        shift=39,
    )
    assert out == [
        "Mon Feb 12 2024 12:00:00 GMT+0000 (UTC)",
        "Fri Mar 01 2024 12:00:00 GMT+0000 (UTC)",
        "Mon Feb 12 2024 12:00:00 GMT+0000 (UTC)",
    ]
