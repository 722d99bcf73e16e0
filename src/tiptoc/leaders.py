"""Heading styles and tab-leader length estimation.

No font metrics are available when the TOC is generated, so leader length
is estimated from character counts, declared font sizes and per-style width
factors. The constants approximate Times New Roman and must stay stable:
rendered documents depend on the exact counts they produce.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from tiptoc.schemas import LeaderChar

LEADER_FONT_SIZE = 12
LEADER_FONT_FAMILY = "Times New Roman"
MIN_LEADER_COUNT = 5
TARGET_WIDTH_RATIO = 0.90
INDENT_FACTOR = 1.2
PADDING_FACTOR = 0.5
REFERENCE_FONT_SIZE = 14

_FONT_SIZES = {1: 18, 2: 16, 3: 14, 4: 12, 5: 12, 6: 10}
_DEFAULT_FONT_SIZE = 12

# (bold, italic) -> average glyph width as a fraction of the font size
_FONT_FACTORS = {
    (True, True): 0.75,
    (True, False): 0.70,
    (False, True): 0.60,
    (False, False): 0.65,
}

# Titles shorter than the bound get at least this many leader characters.
_MIN_LEADERS_BY_LENGTH = ((8, 50), (15, 40), (25, 30), (40, 20))
_MIN_LEADERS_LONG_TITLE = 10


@dataclass(frozen=True)
class HeadingStyle:
    """Emphasis and size used for a TOC line at a given level."""

    font_size: int
    bold: bool
    italic: bool

    @property
    def font_factor(self) -> float:
        return _FONT_FACTORS[(self.bold, self.italic)]


def heading_style(level: int) -> HeadingStyle:
    """Return the style for a heading level.

    Levels up to 4 are bold and levels from 4 are italic, so level 4 is both.
    """
    return HeadingStyle(
        font_size=_FONT_SIZES.get(level, _DEFAULT_FONT_SIZE),
        bold=level <= 4,
        italic=level >= 4,
    )


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def minimum_leader_count(title_length: int, font_size: int) -> int:
    """Return the leader floor for a title, scaled to the font size."""
    minimum = _MIN_LEADERS_LONG_TITLE
    for bound, count in _MIN_LEADERS_BY_LENGTH:
        if title_length < bound:
            minimum = count
            break
    return round_half_up(minimum * REFERENCE_FONT_SIZE / font_size)


def estimate_title_width(
    title: str,
    style: HeadingStyle,
    *,
    level: int,
    indent_enabled: bool,
) -> float:
    indentation = (level - 1) * style.font_size * INDENT_FACTOR if indent_enabled else 0.0
    padding = style.font_size * PADDING_FACTOR
    return len(title) * style.font_size * style.font_factor + indentation + padding


def leader_count(
    title: str,
    level: int,
    *,
    container_width: float,
    leader: LeaderChar = LeaderChar.DOT,
    indent_enabled: bool = False,
) -> int:
    """Estimate how many leader characters align the page number.

    The leader run should end near 90% of the container width. The result
    is never below ``MIN_LEADER_COUNT`` nor below the length-based floor.

    Args:
        title: The full title text (display id and name).
        level: Heading level, which selects size and emphasis.
        container_width: Width of the page area in pixels.
        leader: Leader character; its glyph width scales the count.
        indent_enabled: Whether the line is indented by level.

    Returns:
        The number of leader characters to draw.
    """
    style = heading_style(level)
    title_width = estimate_title_width(
        title, style, level=level, indent_enabled=indent_enabled
    )
    single_width = LEADER_FONT_SIZE * leader.width_factor
    available = container_width * TARGET_WIDTH_RATIO - title_width
    exact = max(round_half_up(available / single_width), MIN_LEADER_COUNT)
    return max(exact, minimum_leader_count(len(title), style.font_size))
