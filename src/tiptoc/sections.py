"""Section slicing and heading collection for tiptap documents."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from tiptoc.config import PLACEHOLDER_HEADING_NAME
from tiptoc.exceptions import ParseError

SECTION_DIVIDER = "sectionDivider"
EDITOR_SECTIONS = ("introduction", "maintext", "bibliography")


@dataclass(frozen=True)
class HeadingRecord:
    """A heading taken from the document, in document order."""

    level: int
    text: str
    position: int


def content_items(document: Any) -> list[Any]:
    """Return the top-level node list of a document.

    Accepts a ``{"content": [...]}`` mapping, a bare list of nodes, or a JSON
    string encoding either.

    Raises:
        ParseError: If the input is not a recognizable document.
    """
    if isinstance(document, (str, bytes)):
        try:
            document = json.loads(document)
        except json.JSONDecodeError as exc:
            raise ParseError(f"Document is not valid JSON: {exc}") from exc
    if isinstance(document, list):
        return document
    if not isinstance(document, Mapping):
        raise ParseError(f"Expected a document object, got {type(document).__name__}")
    content = document.get("content")
    if not isinstance(content, list):
        raise ParseError("Document is missing a 'content' array")
    return content


def extract_heading_text(content: Any) -> str:
    """Join a heading's inline text runs, or return the placeholder name."""
    if not isinstance(content, list):
        return PLACEHOLDER_HEADING_NAME
    text = " ".join(_run_text(run) for run in content).strip()
    return text or PLACEHOLDER_HEADING_NAME


def _run_text(run: Any) -> str:
    if isinstance(run, Mapping):
        return str(run.get("text") or "")
    return ""


def collect_headings(items: Iterable[Any], *, max_level: int) -> list[HeadingRecord]:
    """Select non-empty headings at levels 1..``max_level`` in document order.

    Headings outside that range are skipped.

    Raises:
        ParseError: If a heading carries a missing or invalid level.
    """
    headings: list[HeadingRecord] = []
    for position, item in enumerate(items):
        if not isinstance(item, Mapping) or item.get("type") != "heading":
            continue
        if not item.get("content"):
            continue
        level = _heading_level(item)
        if not 1 <= level <= max_level:
            continue
        text = extract_heading_text(item.get("content"))
        headings.append(HeadingRecord(level=level, text=text, position=position))
    return headings


def _heading_level(item: Mapping[str, Any]) -> int:
    attrs = item.get("attrs")
    level = attrs.get("level") if isinstance(attrs, Mapping) else None
    if isinstance(level, bool) or not isinstance(level, int):
        raise ParseError(f"Heading has no integer level: {attrs!r}")
    return level


def _is_divider(item: Any) -> bool:
    if not isinstance(item, Mapping) or item.get("type") != SECTION_DIVIDER:
        return False
    attrs = item.get("attrs")
    return isinstance(attrs, Mapping) and isinstance(attrs.get("sectionType"), str)


def has_section_dividers(document: Any) -> bool:
    try:
        items = content_items(document)
    except ParseError:
        return False
    return any(_is_divider(item) for item in items)


def extract_section(document: Any, section_type: str) -> list[Any]:
    """Return the nodes between a section divider and the next divider.

    Both dividers are excluded. An unknown section or malformed document
    yields an empty list.
    """
    try:
        items = content_items(document)
    except ParseError:
        return []

    start = next(
        (
            index
            for index, item in enumerate(items)
            if _is_divider(item) and item["attrs"]["sectionType"] == section_type
        ),
        None,
    )
    if start is None:
        return []
    end = next(
        (index for index in range(start + 1, len(items)) if _is_divider(items[index])),
        len(items),
    )
    return list(items[start + 1 : end])


def extract_editor_sections(document: Any) -> dict[str, list[Any]]:
    """Split an editor document into its introduction, main text and bibliography."""
    return {section: extract_section(document, section) for section in EDITOR_SECTIONS}
