"""Convert HTML documents into tiptap-style content for TOC generation."""

from __future__ import annotations

import re
from typing import Any

from tiptoc.exceptions import ParseError
from tiptoc.sections import SECTION_DIVIDER

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise ParseError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


_HEADING_RE = re.compile(r"^h[1-6]$")
_BLOCK_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6", "p", "li", "blockquote", "pre")
_SECTION_ATTR = "data-section-type"


def parse_html_document(html: str) -> dict[str, Any]:
    """Extract headings, section dividers and paragraphs from HTML.

    Headings become ``heading`` nodes with their level, elements carrying
    ``data-section-type`` become ``sectionDivider`` nodes, and other block
    elements with text become paragraphs. Headings inside ``<nav>`` are
    skipped so an existing table of contents is not indexed again.
    """
    soup = BeautifulSoup(html, "lxml")
    root = find_document_root(soup)

    content: list[dict[str, Any]] = []
    for element in root.find_all(_is_block):
        if element.find_parent("nav"):
            continue
        if element.has_attr(_SECTION_ATTR):
            content.append(
                {
                    "type": SECTION_DIVIDER,
                    "attrs": {"sectionType": str(element[_SECTION_ATTR])},
                }
            )
            continue
        if element.find_parent(_is_text_block):
            continue
        text = element.get_text(" ", strip=True)
        if _HEADING_RE.match(element.name):
            content.append(
                {
                    "type": "heading",
                    "attrs": {"level": int(element.name[1])},
                    "content": [{"type": "text", "text": text}] if text else [],
                }
            )
        elif text:
            content.append(
                {"type": "paragraph", "content": [{"type": "text", "text": text}]}
            )
    return {"type": "doc", "content": content}


def _is_block(tag: Tag) -> bool:
    return tag.name in _BLOCK_TAGS or tag.has_attr(_SECTION_ATTR)


def _is_text_block(tag: Tag) -> bool:
    return tag.name in _BLOCK_TAGS and not tag.has_attr(_SECTION_ATTR)


def find_document_root(soup: BeautifulSoup) -> Tag:
    """Find the main content element, preferring ``<article>`` then ``<body>``."""
    article = soup.find("article")
    if article:
        return article
    if soup.body:
        return soup.body
    return soup
