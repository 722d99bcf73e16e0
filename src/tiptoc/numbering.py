"""Numeral formatting for heading display ids."""

from __future__ import annotations

from tiptoc.schemas import NumeralScheme, Separator

_ROMAN_NUMERALS = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)
_ALPHABET_SIZE = 26


def to_roman(number: int) -> str:
    """Convert a positive integer to an upper-case Roman numeral.

    Uses the greedy subtractive algorithm; zero and negative numbers yield
    an empty string.
    """
    parts: list[str] = []
    for value, symbol in _ROMAN_NUMERALS:
        while number >= value:
            parts.append(symbol)
            number -= value
    return "".join(parts)


def to_alpha(number: int, *, upper: bool = False) -> str:
    """Convert a counter to a single letter, clamped at ``z``/``Z``."""
    offset = ord("A") if upper else ord("a")
    return chr(offset - 1 + min(number, _ALPHABET_SIZE))


def format_number(number: int, scheme: NumeralScheme | str | None) -> str:
    """Format a heading counter using one of the five numeral schemes.

    Args:
        number: The 1-based counter value.
        scheme: A ``NumeralScheme``, its code (``"1"``..``"5"``) or its name
            (``"upper-roman"``). Unknown values render as decimal.

    Returns:
        The formatted counter.
    """
    resolved = NumeralScheme(scheme)
    if resolved is NumeralScheme.LOWER_ALPHA:
        return to_alpha(number)
    if resolved is NumeralScheme.UPPER_ALPHA:
        return to_alpha(number, upper=True)
    if resolved is NumeralScheme.LOWER_ROMAN:
        return to_roman(number).lower()
    if resolved is NumeralScheme.UPPER_ROMAN:
        return to_roman(number)
    return str(number)


def resolve_separator(code: Separator | str | None) -> str:
    """Return the separator character for a configuration code."""
    return Separator(code).char
