from __future__ import annotations

from pathlib import Path

import pytest

from rolling_painter.config import RemapConfig, parse_alignment

ENV_VARS = ("ROLLING_PAINTER_ALIGN", "ROLLING_PAINTER_SOURCE_YEAR", "ROLLING_PAINTER_RULES")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> pytest.MonkeyPatch:
    for k in ENV_VARS:
        monkeypatch.delenv(k, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


def test_parse_alignment() -> None:
    assert parse_alignment(None) == "left"
    assert parse_alignment("") == "left"
    assert parse_alignment(" Center ") == "center"
    assert parse_alignment("right") == "right"
    with pytest.raises(ValueError):
        parse_alignment("middle")


def test_from_env_defaults(clean_env: pytest.MonkeyPatch) -> None:
    cfg = RemapConfig.from_env()
    assert cfg == RemapConfig(align="left", source_year=2019, rules_path=None)


def test_from_env_values(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    clean_env.setenv("ROLLING_PAINTER_ALIGN", "right")
    clean_env.setenv("ROLLING_PAINTER_SOURCE_YEAR", "2018")
    clean_env.setenv("ROLLING_PAINTER_RULES", str(tmp_path / "rules.json"))
    cfg = RemapConfig.from_env()
    assert cfg.align == "right"
    assert cfg.source_year == 2018
    assert cfg.rules_path == tmp_path / "rules.json"


def test_from_env_bad_values(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("ROLLING_PAINTER_SOURCE_YEAR", "twenty")
    with pytest.raises(ValueError):
        RemapConfig.from_env()
    clean_env.setenv("ROLLING_PAINTER_SOURCE_YEAR", "2019")
    clean_env.setenv("ROLLING_PAINTER_ALIGN", "up")
    with pytest.raises(ValueError):
        RemapConfig.from_env()
