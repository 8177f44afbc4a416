"""Tests for input helpers."""

import re

import pytest

from inventory_manager import utils


class TestParsing:
    """Tests for strict numeric parsing."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("12", 12),
            (" 7 ", 7),
            ("-3", -3),
            ("+4", 4),
            ("12abc", None),
            ("", None),
            ("1.5", None),
            ("1_000", None),
            ("\u0661\u0662", None),  # Arabic-Indic digits
            ("- 3", None),
        ],
    )
    def test_parse_int(self, text: str, expected) -> None:
        assert utils.parse_int(text) == expected

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1.5", 1.5),
            (" 2 ", 2.0),
            ("-0.25", -0.25),
            (".5", 0.5),
            ("3.", 3.0),
            ("1e2", 100.0),
            ("abc", None),
            ("1.5x", None),
            ("1_0.5", None),
            ("nan", None),
            ("NaN", None),
            ("inf", None),
            ("-Infinity", None),
            ("1e400", None),
            (".", None),
        ],
    )
    def test_parse_float(self, text: str, expected) -> None:
        assert utils.parse_float(text) == expected


class TestText:
    """Tests for cancel detection and sanitising."""

    @pytest.mark.parametrize("text", ["cancel", "  CANCEL ", "c", "C"])
    def test_is_cancel(self, text: str) -> None:
        assert utils.is_cancel(text)

    @pytest.mark.parametrize("text", ["", "cancelled", "Cog"])
    def test_is_not_cancel(self, text: str) -> None:
        assert not utils.is_cancel(text)

    def test_sanitize_text(self) -> None:
        assert utils.sanitize_text("a,b\nc\rd") == "a b c d"

    def test_timestamp_format(self) -> None:
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", utils.get_current_timestamp())
