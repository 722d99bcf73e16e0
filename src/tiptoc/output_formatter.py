"""Render a TOC tree into dot-leader lines, tiptap documents and outlines."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from tiptoc.config import DEFAULT_TOC_TITLE, PAGE_NUMBER_PLACEHOLDER
from tiptoc.leaders import (
    LEADER_FONT_FAMILY,
    LEADER_FONT_SIZE,
    heading_style,
    leader_count,
)
from tiptoc.schemas import LayoutConfig, TextRun, TocLine, TocNode

_TITLE_FONT_SIZE = 18
_SPACER_LEVEL = 5


def iter_nodes(nodes: Iterable[TocNode]) -> Iterator[TocNode]:
    """Yield nodes depth-first, each parent before its children."""
    for node in nodes:
        yield node
        yield from iter_nodes(node.children)


def flatten_tree(nodes: Iterable[TocNode]) -> list[TocNode]:
    """Return a pre-order copy of the tree with every node's children removed."""
    return [node.model_copy(update={"children": []}) for node in iter_nodes(nodes)]


def count_nodes(nodes: Iterable[TocNode]) -> int:
    """Count total nodes in the tree."""
    return sum(1 for _ in iter_nodes(nodes))


def render_toc_line(node: TocNode, layout: LayoutConfig) -> TocLine:
    """Lay out one heading with its leader run and page-number slot."""
    style = heading_style(node.level)
    title = node.combined_label
    count = leader_count(
        title,
        node.level,
        container_width=layout.container_width,
        leader=layout.tab_leader,
        indent_enabled=layout.indent_enabled,
    )
    return TocLine(
        level=node.level,
        title_run=TextRun(
            text=f"{title} ",
            bold=style.bold,
            italic=style.italic,
            font_size=style.font_size,
        ),
        leader_run=TextRun(
            text=layout.tab_leader.char * count,
            font_size=LEADER_FONT_SIZE,
            font_family=LEADER_FONT_FAMILY,
            letter_spacing="0px",
        ),
        trailing_run=TextRun(
            text=PAGE_NUMBER_PLACEHOLDER,
            bold=style.bold,
            italic=style.italic,
            font_size=style.font_size,
        ),
    )


def render_toc_lines(nodes: Iterable[TocNode], layout: LayoutConfig) -> list[TocLine]:
    return [render_toc_line(node, layout) for node in iter_nodes(nodes)]


def render_toc_document(
    nodes: list[TocNode] | None,
    layout: LayoutConfig | None = None,
) -> dict[str, Any]:
    """Assemble the TOC as a tiptap document.

    The document opens with a spacer and the upper-cased title. Each
    top-level node contributes its own line and its descendants' lines in
    pre-order, followed by a spacer. An empty tree yields an empty document.
    """
    if not nodes:
        return {"type": "doc", "content": []}

    layout = layout or LayoutConfig()
    title = TextRun(
        text=(layout.title or DEFAULT_TOC_TITLE).upper(),
        font_size=_TITLE_FONT_SIZE,
    )
    content: list[dict[str, Any]] = [
        _spacer(),
        {"type": "paragraph", "attrs": {"level": 1}, "content": [title.to_node()]},
    ]
    for node in nodes:
        content.extend(line.to_node() for line in render_toc_lines([node], layout))
        content.append(_spacer())
    return {"type": "doc", "content": content}


def _spacer() -> dict[str, Any]:
    return {
        "type": "paragraph",
        "attrs": {"class": "toc-spacer", "level": _SPACER_LEVEL},
        "content": [],
    }


def format_outline(nodes: list[TocNode], indent: int = 0) -> str:
    """Render the tree as indented plain text, one label per line."""
    lines: list[str] = []
    for node in nodes:
        lines.append(" " * (indent * 4) + node.combined_label)
        if node.children:
            lines.append(format_outline(node.children, indent + 1))
    return "\n".join(lines)


def format_summary(nodes: list[TocNode], *, title: str | None = None) -> str:
    """Summarize a tree: title, entry count and deepest level."""
    summary_lines = []
    if title:
        summary_lines.append(f"Title: {title}")
    summary_lines.append(f"Entries: {count_nodes(nodes)}")
    levels = [node.level for node in iter_nodes(nodes)]
    if levels:
        summary_lines.append(f"Deepest level: {max(levels)}")
    return "\n".join(summary_lines)
