import math
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from password_strength_estimator import (
    CATEGORY_HINTS,
    Category,
    analyze,
    format_duration,
    human_number,
    render_report,
    shade_color,
    strength_percent,
)


@pytest.mark.parametrize(
    "n, expected",
    [
        (0.5, "1"),
        (999, "999"),
        (1000, "1.00K"),
        (1500000, "1.50M"),
        (2.5e18, "2.50E"),
        (4e21, "4000.00E"),
        (math.inf, "∞"),
    ],
)
def test_human_number(n, expected):
    assert human_number(n) == expected


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0.0005, "0.5 ms"),
        (5.3, "5.3 s"),
        (90, "1.5 min"),
        (7200, "2.0 h"),
        (86400 * 3, "3.0 d"),
        (31557600 * 42, "42.0 y"),
        (31557600 * 1000, "1.00e+03 y"),
        (1e31, "∞"),
        (math.inf, "∞"),
    ],
)
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected


def test_strength_percent_caps_at_full():
    assert strength_percent(0.0) == 0.0
    assert strength_percent(64.0) == pytest.approx(50.0)
    assert strength_percent(500.0) == 100.0


def test_shade_color():
    assert shade_color("#e74c3c", 0) == "#e74c3c"
    assert shade_color("#e74c3c", 100) == "#ffffff"
    assert shade_color("#e74c3c", -100) == "#000000"
    assert shade_color("#102030", 2) == "#152535"


def test_every_category_has_a_hint():
    assert set(CATEGORY_HINTS) == set(Category)
    assert CATEGORY_HINTS[Category.REASONABLE].text_color == "#222"
    assert CATEGORY_HINTS[Category.VERY_STRONG].emoji == "💪"


def test_render_report_without_color():
    lines = render_report(analyze("aaaaaaaaaaaa"), use_color=False)
    assert lines[0] == "Strength: Reasonable 🟡 (44%)"
    assert "Charset size: 26" in lines
    assert "Character classes: lowercase" in lines
    assert sum(1 for line in lines if line.startswith("  - ") and "/s)" in line) == 5
    assert not any("\033[" in line for line in lines)


def test_render_report_with_color():
    lines = render_report(analyze("abc"), use_color=True)
    assert lines[0].startswith("\033[31m")
    assert lines[0].endswith("\033[0m")


def test_render_report_percent_rounds_half_up():
    # 16 symbols is 80 bits, exactly 62.5% of the bar
    lines = render_report(analyze("!" * 16), use_color=False)
    assert lines[0] == "Strength: Strong 🟢 (63%)"
