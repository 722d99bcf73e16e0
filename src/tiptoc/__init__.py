"""tiptoc: numbered, dot-leader tables of contents for tiptap documents."""

from tiptoc.exceptions import FetchError, ParseError, TiptocError
from tiptoc.numbering import format_number, to_roman
from tiptoc.output_formatter import (
    count_nodes,
    flatten_tree,
    format_outline,
    render_toc_document,
    render_toc_lines,
)
from tiptoc.pipeline import TocOptions, generate_toc
from tiptoc.schemas import (
    LayoutConfig,
    LeaderChar,
    NumberingConfig,
    NumeralScheme,
    Separator,
    TocLine,
    TocNode,
    TocResult,
    TocSettings,
)
from tiptoc.sections import extract_editor_sections, extract_section
from tiptoc.tree_builder import build_toc_tree

__all__ = [
    "FetchError",
    "LayoutConfig",
    "LeaderChar",
    "NumberingConfig",
    "NumeralScheme",
    "ParseError",
    "Separator",
    "TiptocError",
    "TocLine",
    "TocNode",
    "TocOptions",
    "TocResult",
    "TocSettings",
    "build_toc_tree",
    "count_nodes",
    "extract_editor_sections",
    "extract_section",
    "flatten_tree",
    "format_number",
    "format_outline",
    "generate_toc",
    "render_toc_document",
    "render_toc_lines",
    "to_roman",
]
