"""Tests for the command line entry point."""

from __future__ import annotations

import pytest

from nldate.cli.main import EXIT_PARSE_ERROR, main

_NOW = "2025-01-15T10:20:30+00:00"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("LOG_LEVEL", "NLDATE_NOW", "NLDATE_DISPLAY_OFFSET"):
        monkeypatch.delenv(name, raising=False)


def test_prints_iso_timestamp(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["next", "monday", "at", "14:30", "--now", _NOW]) == 0
    assert capsys.readouterr().out == "2025-01-20T14:30:00+00:00\n"


def test_prints_natural_rendering(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["next monday at 14:30", "--now", _NOW, "--natural"]) == 0
    assert capsys.readouterr().out.splitlines() == ["2025-01-20T14:30:00+00:00", "Mon, 14:30"]


def test_natural_date_only(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["next monday", "--now", _NOW, "--natural", "--date-only"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "Mon"


def test_reference_now_from_environment(
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setenv("NLDATE_NOW", _NOW)
    assert main(["jutro", "rano"]) == 0
    assert capsys.readouterr().out == "2025-01-16T08:00:00+00:00\n"


def test_display_offset_from_environment_and_flag(
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setenv("NLDATE_DISPLAY_OFFSET", "2")
    assert main(["today 23:30", "--now", _NOW, "--natural"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "Tomorrow, 01:30"

    assert main(["today 23:30", "--now", _NOW, "--natural", "--offset", "-1"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "Today, 22:30"


def test_parse_error_exits_non_zero(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["today", "25:00", "--now", _NOW]) == EXIT_PARSE_ERROR
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "nldate: invalid date/time" in captured.err


@pytest.mark.parametrize("offset", ["30", "-15", "two"])
def test_out_of_range_offset_is_a_usage_error(offset: str, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["today", "--now", _NOW, "--natural", "--offset", offset])
    assert excinfo.value.code == 2

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "--offset" in captured.err


def test_offset_bounds_are_accepted(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["today", "--now", _NOW, "--natural", "--offset", "14"]) == 0
    assert main(["today", "--now", _NOW, "--natural", "--offset", "-14"]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 4


def test_natural_rendering_near_max_year(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["31.12.9999 23:00", "--now", _NOW, "--natural", "--offset", "2"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "9999-12-31T23:00:00+00:00",
        "9999-12-31, 23:00",
    ]
