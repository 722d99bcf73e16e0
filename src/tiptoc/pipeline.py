"""End-to-end table-of-contents generation for editor documents."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from tiptoc.output_formatter import format_outline, format_summary, render_toc_document
from tiptoc.schemas import TocResult, TocSettings
from tiptoc.sections import extract_section, has_section_dividers
from tiptoc.tree_builder import build_toc_tree

logger = logging.getLogger(__name__)

DEFAULT_SECTION = "maintext"


@dataclass
class TocOptions:
    """Options for TOC generation.

    Attributes:
        section: Editor section whose headings are indexed. ``None`` indexes
            the whole document, as does a document without section dividers.
        container_width: Page width in pixels used to size leader runs.
            Falls back to the configured default when unset.
    """

    section: str | None = DEFAULT_SECTION
    container_width: float | None = None


def generate_toc(
    document: Any,
    settings: TocSettings | Mapping[str, Any] | None = None,
    *,
    options: TocOptions | None = None,
) -> TocResult:
    """Build and render the table of contents for an editor document.

    Args:
        document: A tiptap document mapping, node list or JSON string.
        settings: Editor TOC settings, as a model or a camelCase mapping.
        options: Section and layout options. Uses defaults if None.

    Returns:
        The heading tree, the rendered tiptap document, a plain-text
        outline and a short summary.
    """
    opts = options or TocOptions()
    toc_settings = _coerce_settings(settings)

    if opts.section and has_section_dividers(document):
        source: Any = extract_section(document, opts.section)
        logger.debug("Indexing headings from section %r", opts.section)
    else:
        source = document

    tree = build_toc_tree(source, toc_settings)
    layout = toc_settings.layout_config(opts.container_width)
    return TocResult(
        tree=tree,
        document=render_toc_document(tree, layout),
        outline=format_outline(tree),
        summary=format_summary(tree, title=toc_settings.title),
    )


def _coerce_settings(settings: TocSettings | Mapping[str, Any] | None) -> TocSettings:
    if settings is None:
        return TocSettings()
    if isinstance(settings, TocSettings):
        return settings
    return TocSettings.model_validate(dict(settings))
