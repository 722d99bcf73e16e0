"""Shared schemas for tiptoc."""

from tiptoc.schemas.settings import (
    LayoutConfig,
    LeaderChar,
    NumberingConfig,
    NumeralScheme,
    Separator,
    TocSettings,
)
from tiptoc.schemas.toc import TextRun, TocLine, TocNode, TocResult

__all__ = [
    "LayoutConfig",
    "LeaderChar",
    "NumberingConfig",
    "NumeralScheme",
    "Separator",
    "TextRun",
    "TocLine",
    "TocNode",
    "TocResult",
    "TocSettings",
]
