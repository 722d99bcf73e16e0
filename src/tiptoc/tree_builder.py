"""Build a numbered table-of-contents tree from document headings."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any

from tiptoc.exceptions import ParseError
from tiptoc.numbering import format_number
from tiptoc.schemas import NumberingConfig, TocNode, TocSettings
from tiptoc.sections import HeadingRecord, collect_headings, content_items

logger = logging.getLogger(__name__)


def build_toc_tree(
    document: Any,
    settings: TocSettings | NumberingConfig | None = None,
) -> list[TocNode]:
    """Build the heading forest for a document.

    Headings deeper than the configured number of levels are skipped. Each
    node gets a structural id and, when heading numbers are enabled, a
    formatted display id. Per-level counters run across the whole document
    and are not reset when the parent changes, so a second-level heading
    under ``2`` may be numbered ``2.2``.

    Args:
        document: A ``{"content": [...]}`` mapping, a list of nodes, or a
            JSON string of either.
        settings: Editor settings or a numbering config. Without settings,
            three levels are included and display ids are off.

    Returns:
        The top-level nodes. Malformed input is logged and yields ``[]``.
    """
    numbering = _numbering_config(settings)
    try:
        headings = collect_headings(content_items(document), max_level=numbering.levels)
    except ParseError as exc:
        logger.error("Cannot build table of contents: %s", exc)
        return []

    logger.debug("Building table of contents from %d headings", len(headings))
    return _TreeBuilder(numbering).build(headings)


def _numbering_config(settings: TocSettings | NumberingConfig | None) -> NumberingConfig:
    if settings is None:
        return NumberingConfig()
    if isinstance(settings, TocSettings):
        return settings.numbering_config()
    return settings


class _TreeBuilder:
    """Single-use state for one build pass."""

    def __init__(self, numbering: NumberingConfig) -> None:
        self.numbering = numbering
        self.separator = numbering.separator.char
        self.standard_counters: Counter[int] = Counter()
        self.display_counters: Counter[int] = Counter()
        self.last_seen: dict[int, TocNode] = {}

    def build(self, headings: list[HeadingRecord]) -> list[TocNode]:
        forest: list[TocNode] = []
        for heading in headings:
            parent = self._find_parent(heading.level)
            logger.debug(
                "Heading %r (level %d) at position %d",
                heading.text,
                heading.level,
                heading.position,
            )
            node = TocNode(
                id=self._standard_id(heading.level, parent),
                display_id=self._display_id(heading.level, parent),
                name=heading.text,
                level=heading.level,
            )

            if parent is not None:
                parent.children.append(node)
            else:
                if heading.level > 1:
                    logger.warning(
                        "Heading %r at level %d has no parent; placing it at the top level",
                        heading.text,
                        heading.level,
                    )
                forest.append(node)

            self.last_seen[heading.level] = node
            for deeper in [level for level in self.last_seen if level > heading.level]:
                del self.last_seen[deeper]
        return forest

    def _find_parent(self, level: int) -> TocNode | None:
        for candidate in range(level - 1, 0, -1):
            if candidate in self.last_seen:
                return self.last_seen[candidate]
        return None

    def _standard_id(self, level: int, parent: TocNode | None) -> str:
        self.standard_counters[level] += 1
        number = str(self.standard_counters[level])
        if level > 1 and parent is not None:
            return f"{parent.id}.{number}"
        return number

    def _display_id(self, level: int, parent: TocNode | None) -> str | None:
        if not self.numbering.display_enabled:
            return None
        self.display_counters[level] += 1
        number = format_number(self.display_counters[level], self.numbering.scheme_for(level))
        if level > 1 and parent is not None and parent.display_id:
            return f"{parent.display_id}{self.separator}{number}"
        return number
