from __future__ import annotations

from pathlib import Path

import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from report import format_crossing, hours_to_hms, local_clock, render_report
from sunriset.astro import AlwaysAbove, AlwaysBelow, Normal
from sunstat import main

EDT = -4 * 3600


@pytest.mark.parametrize(
    "ut_hours, offset_seconds, expected",
    [
        (9.5, 0, "09:30"),
        (9.5, EDT, "05:30"),
        (24.5, EDT, "20:30"),
        (-1.5, 0, "22:30"),
        (23.75, 9 * 3600, "08:45"),
        (12.0, 5.5 * 3600, "17:30"),
        (10.999, 0, "10:59"),
    ],
)
def test_local_clock(ut_hours, offset_seconds, expected):
    assert local_clock(ut_hours, offset_seconds) == expected


def test_hours_to_hms():
    assert hours_to_hms(12.5) == "12h30m00s"
    assert hours_to_hms(24.0) == "24h00m00s"
    assert hours_to_hms(0.0) == "00h00m00s"
    assert hours_to_hms(1.0 + 1.0 / 60.0 + 30.0 / 3600.0).startswith("01h01m")


def test_format_crossing_variants():
    assert format_crossing(Normal(9.5, 21.25), 0, "UTC") == "09:30 UTC   21:15 UTC"
    assert format_crossing(AlwaysAbove(0.0, 24.0), 0, "UTC") == "---         (none)"
    assert format_crossing(AlwaysBelow(12.0, 12.0), 0, "UTC") == "(none)      ---"


def test_report_new_york():
    text = render_report(2000, 6, 21, 40.6611, -73.9439, EDT, "EDT")
    lines = text.splitlines()

    assert lines[0] == " " * 23 + "Sunrise     Sunset"
    assert lines[1].startswith(" " * 23 + "05:2")
    assert lines[1].endswith("EDT")
    assert lines[2].startswith("       Civil twilight  ")
    assert lines[3].startswith("    Nautical twilight  ")
    assert lines[4].startswith("Astronomical twilight  ")
    assert lines[5] == ""
    assert lines[6].startswith("Hours of daylight, incl. civil twilight: 16h")
    assert lines[7].startswith("The Sun is overhead (due south/north) at 12:5")
    assert lines[7].endswith(" EDT.")


def test_report_polar_rows():
    summer = render_report(2000, 6, 21, 78.0, 15.0, 3600, "CET").splitlines()
    assert summer[1] == " " * 23 + "---         (none)"
    assert summer[2] == "       Civil twilight  ---         (none)"
    assert summer[6] == "Hours of daylight, incl. civil twilight: 24h00m00s."

    winter = render_report(2000, 12, 21, 78.0, 15.0, 3600, "CET").splitlines()
    assert winter[1] == " " * 23 + "(none)      ---"
    assert winter[6] == "Hours of daylight, incl. civil twilight: 00h00m00s."


def test_cli_prints_report(capsys):
    code = main(["40.6611", "-73.9439", "--date", "2000-06-21", "--tz-offset", "-4", "--zone", "EDT"])
    assert code == 0
    out = capsys.readouterr().out
    assert "Sunrise     Sunset" in out
    assert "Civil twilight" in out
    assert out.rstrip().endswith("EDT.")


def test_cli_defaults_zone_label_for_utc(capsys):
    assert main(["0", "0", "--date", "2000-03-20", "--tz-offset", "0"]) == 0
    assert "UTC" in capsys.readouterr().out


def test_cli_rejects_bad_date():
    with pytest.raises(SystemExit) as excinfo:
        main(["40.0", "-74.0", "--date", "2000-13-40"])
    assert excinfo.value.code == 2


def test_cli_rejects_large_offset():
    with pytest.raises(SystemExit) as excinfo:
        main(["40.0", "-74.0", "--tz-offset", "30"])
    assert excinfo.value.code == 2


def test_cli_requires_coordinates():
    with pytest.raises(SystemExit) as excinfo:
        main(["40.0"])
    assert excinfo.value.code == 2
