"""Tests for numeral formatting."""

from __future__ import annotations

import pytest

from tiptoc.numbering import format_number, resolve_separator, to_alpha, to_roman
from tiptoc.schemas import NumeralScheme, Separator


class TestToRoman:
    """Tests for to_roman function."""

    @pytest.mark.parametrize(
        ("number", "expected"),
        [
            (1, "I"),
            (4, "IV"),
            (9, "IX"),
            (14, "XIV"),
            (40, "XL"),
            (90, "XC"),
            (400, "CD"),
            (1994, "MCMXCIV"),
            (2024, "MMXXIV"),
        ],
    )
    def test_subtractive_notation(self, number: int, expected: str) -> None:
        """Greedy subtractive conversion produces standard numerals."""
        assert to_roman(number) == expected

    def test_zero_is_empty(self) -> None:
        """Zero has no Roman representation."""
        assert to_roman(0) == ""


class TestToAlpha:
    """Tests for to_alpha function."""

    def test_first_and_last_letters(self) -> None:
        """Counters 1 and 26 map to a and z."""
        assert to_alpha(1) == "a"
        assert to_alpha(26) == "z"

    def test_clamps_after_z(self) -> None:
        """Counters past 26 stay on the last letter instead of overflowing."""
        assert to_alpha(27) == "z"
        assert to_alpha(100, upper=True) == "Z"


class TestFormatNumber:
    """Tests for format_number function."""

    def test_decimal(self) -> None:
        """Decimal renders the number unchanged."""
        assert format_number(12, NumeralScheme.DECIMAL) == "12"

    def test_accepts_scheme_names(self) -> None:
        """Descriptive scheme names are accepted."""
        assert format_number(4, "upper-roman") == "IV"
        assert format_number(9, "upper-roman") == "IX"
        assert format_number(2024, "upper-roman") == "MMXXIV"
        assert format_number(27, "lower-alpha") == "z"
        assert format_number(3, "upper-alpha") == "C"

    def test_accepts_setting_codes(self) -> None:
        """The editor's numeric setting codes select schemes."""
        assert format_number(2, "2") == "b"
        assert format_number(2, "3") == "B"
        assert format_number(6, "4") == "vi"
        assert format_number(6, "5") == "VI"

    @pytest.mark.parametrize("scheme", ["6", "greek", "", None])
    def test_unknown_scheme_falls_back_to_decimal(self, scheme: str | None) -> None:
        """Unrecognized schemes render as decimal."""
        assert format_number(7, scheme) == "7"


class TestResolveSeparator:
    """Tests for resolve_separator function."""

    def test_codes(self) -> None:
        """Codes 1-3 select ')', '.' and '-'."""
        assert resolve_separator("1") == ")"
        assert resolve_separator("2") == "."
        assert resolve_separator("3") == "-"

    def test_literal_characters(self) -> None:
        """The separator characters themselves are accepted."""
        assert resolve_separator(")") == ")"
        assert resolve_separator(Separator.DASH) == "-"

    @pytest.mark.parametrize("code", ["0", "9", "", None])
    def test_unknown_code_falls_back_to_dot(self, code: str | None) -> None:
        """Unrecognized codes use '.'."""
        assert resolve_separator(code) == "."
