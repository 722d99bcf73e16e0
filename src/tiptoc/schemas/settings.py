"""Settings and format-code models."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from tiptoc.config import DEFAULT_TOC_TITLE, TIPTOC_CONTAINER_WIDTH

MAX_HEADING_LEVEL = 6
NBSP = "\u00a0"


def _normalize_code(value: object) -> str:
    return str(value).strip().lower()


class NumeralScheme(str, Enum):
    """Numeral scheme applied to a heading counter."""

    DECIMAL = "1"
    LOWER_ALPHA = "2"
    UPPER_ALPHA = "3"
    LOWER_ROMAN = "4"
    UPPER_ROMAN = "5"

    @classmethod
    def _missing_(cls, value: object) -> NumeralScheme:
        key = _normalize_code(value)
        code = _SCHEME_NAMES.get(key, key)
        if code in cls._value2member_map_:
            return cls._value2member_map_[code]
        return cls.DECIMAL


_SCHEME_NAMES = {
    "decimal": "1",
    "lower-alpha": "2",
    "upper-alpha": "3",
    "lower-roman": "4",
    "upper-roman": "5",
}


class Separator(str, Enum):
    """Character joining a parent's display id to its child's number."""

    PAREN = "1"
    DOT = "2"
    DASH = "3"

    @property
    def char(self) -> str:
        return _SEPARATOR_CHARS[self]

    @classmethod
    def _missing_(cls, value: object) -> Separator:
        key = _normalize_code(value)
        for member, char in _SEPARATOR_CHARS.items():
            if key == char:
                return member
        if key in cls._value2member_map_:
            return cls._value2member_map_[key]
        return cls.DOT


_SEPARATOR_CHARS = {
    Separator.PAREN: ")",
    Separator.DOT: ".",
    Separator.DASH: "-",
}


class LeaderChar(str, Enum):
    """Tab-leader character drawn between a title and its page number."""

    NONE = "0"
    DOT = "1"
    DASH = "2"
    UNDERSCORE = "3"

    @property
    def char(self) -> str:
        return _LEADER_CHARS[self]

    @property
    def width_factor(self) -> float:
        """Glyph width as a fraction of the 12pt leader font size."""
        return _LEADER_WIDTH_FACTORS[self]

    @classmethod
    def _missing_(cls, value: object) -> LeaderChar:
        if value == NBSP:
            return cls.NONE
        key = _normalize_code(value)
        for member, char in _LEADER_CHARS.items():
            if key == char:
                return member
        if key in cls._value2member_map_:
            return cls._value2member_map_[key]
        return cls.DOT


_LEADER_CHARS = {
    LeaderChar.NONE: NBSP,
    LeaderChar.DOT: ".",
    LeaderChar.DASH: "-",
    LeaderChar.UNDERSCORE: "_",
}

# Times New Roman approximations; there is no real font measurement.
_LEADER_WIDTH_FACTORS = {
    LeaderChar.NONE: 0.3,
    LeaderChar.DOT: 0.3,
    LeaderChar.DASH: 0.45,
    LeaderChar.UNDERSCORE: 0.52,
}


class NumberingConfig(BaseModel):
    """Options controlling heading selection and id formatting.

    Attributes:
        levels: Deepest heading level included in the tree.
        display_enabled: Whether formatted display ids are generated.
        separator: Separator joining parent and child display ids.
        level_formats: Numeral scheme per heading level; missing levels
            render as decimal.
    """

    levels: int = Field(3, ge=1, le=MAX_HEADING_LEVEL)
    display_enabled: bool = False
    separator: Separator = Separator.DOT
    level_formats: dict[int, NumeralScheme] = Field(default_factory=dict)

    @field_validator("separator", mode="before")
    @classmethod
    def coerce_separator(cls, value: Any) -> Separator:
        return Separator(value)

    @field_validator("level_formats", mode="before")
    @classmethod
    def coerce_level_formats(cls, value: Any) -> dict[int, NumeralScheme]:
        return {int(level): NumeralScheme(scheme) for level, scheme in dict(value).items()}

    def scheme_for(self, level: int) -> NumeralScheme:
        return self.level_formats.get(level, NumeralScheme.DECIMAL)


class LayoutConfig(BaseModel):
    """Options controlling how TOC lines are laid out."""

    container_width: float = Field(TIPTOC_CONTAINER_WIDTH, gt=0)
    tab_leader: LeaderChar = LeaderChar.DOT
    indent_enabled: bool = False
    title: str = DEFAULT_TOC_TITLE

    @field_validator("tab_leader", mode="before")
    @classmethod
    def coerce_tab_leader(cls, value: Any) -> LeaderChar:
        return LeaderChar(value)


class TocSettings(BaseModel):
    """Table-of-contents settings as persisted by the editor.

    Accepts the editor's camelCase keys (``showHeadingNumbers``,
    ``level1Format``) as well as snake_case field names.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    show: bool = True
    levels: int = Field(3, ge=1, le=MAX_HEADING_LEVEL)
    indent_levels: bool = True
    title: str = "Table of Contents"
    tab_leader_format: str = "1"
    show_heading_numbers: bool = True
    number_separator: str = "2"
    level1_format: str | None = Field("1", alias="level1Format")
    level2_format: str | None = Field("1", alias="level2Format")
    level3_format: str | None = Field("1", alias="level3Format")
    level4_format: str | None = Field("1", alias="level4Format")
    level5_format: str | None = Field("1", alias="level5Format")
    level6_format: str | None = Field("1", alias="level6Format")

    def level_format(self, level: int) -> NumeralScheme:
        """Return the numeral scheme for a level.

        An unset format falls back to the code matching the level number, so
        level 2 defaults to lower-alpha and level 6 (no such code) to decimal.
        """
        code = getattr(self, f"level{level}_format", None)
        return NumeralScheme(code or str(level))

    def numbering_config(self) -> NumberingConfig:
        return NumberingConfig(
            levels=self.levels,
            display_enabled=self.show_heading_numbers,
            separator=self.number_separator,
            level_formats={
                level: self.level_format(level)
                for level in range(1, MAX_HEADING_LEVEL + 1)
            },
        )

    def layout_config(self, container_width: float | None = None) -> LayoutConfig:
        return LayoutConfig(
            container_width=container_width or TIPTOC_CONTAINER_WIDTH,
            tab_leader=self.tab_leader_format,
            indent_enabled=self.indent_levels,
            title=self.title or DEFAULT_TOC_TITLE,
        )
