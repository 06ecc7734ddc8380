from __future__ import annotations

import pytest

from vtscli.commands import Color
from vtscli.exceptions import InvalidArgument
from vtscli.utils.parsing import parse_bool, parse_duration, parse_hex_color, parse_number


@pytest.mark.parametrize(
    "text, seconds",
    [
        ("500ms", 0.5),
        ("5s", 5.0),
        ("1m30s", 90.0),
        ("1m 30s", 90.0),
        ("2", 2.0),
        ("0.25", 0.25),
        ("1h", 3600.0),
        ("2min", 120.0),
    ],
)
def test_parse_duration(text: str, seconds: float) -> None:
    assert parse_duration(text) == pytest.approx(seconds)


def test_parse_number_accepts_finite_values() -> None:
    assert parse_number("-0.5") == -0.5
    assert parse_number("1e2") == 100.0


@pytest.mark.parametrize("text", ["inf", "nan", "Infinity", "x"])
def test_parse_number_rejects_non_finite(text: str) -> None:
    with pytest.raises(InvalidArgument):
        parse_number(text)


@pytest.mark.parametrize(
    "text", ["", "abc", "5x", "s5", "-1", "5s garbage", "inf", "nan", "-inf"]
)
def test_parse_duration_rejects_garbage(text: str) -> None:
    with pytest.raises(InvalidArgument):
        parse_duration(text)


@pytest.mark.parametrize(
    "text, color",
    [
        ("#ffffff", Color(255, 255, 255, 255)),
        ("f00", Color(255, 0, 0, 255)),
        ("#f008", Color(255, 0, 0, 136)),
        ("#11223344", Color(0x11, 0x22, 0x33, 0x44)),
        ("00ff00", Color(0, 255, 0, 255)),
    ],
)
def test_parse_hex_color(text: str, color: Color) -> None:
    assert parse_hex_color(text) == color


@pytest.mark.parametrize("text", ["#12345", "zzz", "", "#fffffffff"])
def test_parse_hex_color_rejects_garbage(text: str) -> None:
    with pytest.raises(InvalidArgument) as excinfo:
        parse_hex_color(text)

    assert "hex color" in str(excinfo.value)


def test_parse_bool() -> None:
    assert parse_bool("true") is True
    assert parse_bool("No") is False
    with pytest.raises(InvalidArgument):
        parse_bool("maybe")
