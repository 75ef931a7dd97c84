from __future__ import annotations

from playsim.types import Distribution
from playsim.ui.report import combo_percent, format_report, play_info, report_dict


def test_combo_percent():
    assert combo_percent(300, 600) == 50.0
    assert combo_percent(2, 3) == 66.67
    assert combo_percent(0, 0) == 0.0


def test_play_info_rows():
    rows = play_info(Distribution(93, 5, 2, 0), 600, 600)
    assert rows == [
        ("Accuracy", "95.00%"),
        ("Combo", "600 (100.0%)"),
        ("Perfect", "93"),
        ("Good", "5"),
        ("Acceptable", "2"),
        ("Miss", "0"),
    ]


def test_play_info_localized():
    rows = play_info(Distribution(1, 0, 0, 1), 1, 2, lang="zh-CN")
    assert rows[0] == ("准确率", "50.00%")
    assert rows[-1] == ("失误", "1")


def test_format_report_plain():
    text = format_report(Distribution(8, 0, 0, 2), 5, 10, color=False)
    lines = text.splitlines()
    assert lines[0].startswith("Accuracy")
    assert lines[0].endswith(": 80.00%")
    assert "5 (50.0%)" in lines[1]
    assert "\x1b[" not in text


def test_format_report_with_exact():
    text = format_report(Distribution(93, 5, 2, 0), 100, 100, exact=Distribution(94, 0, 6, 0), color=False)
    assert "94/0/6/0" in text
    assert "0.0000%" in text


def test_format_report_empty_play():
    text = format_report(Distribution(), 0, 0, color=False)
    assert "0.00%" in text


def test_report_dict():
    doc = report_dict(Distribution(6, 2, 1, 1), 7, 10)
    assert doc["statistics"] == {"PERFECT": 6, "GOOD": 2, "ACCEPTABLE": 1, "MISS": 1}
    assert doc["combo"] == 7
    assert doc["max_combo"] == 10
    assert "exact" not in doc
