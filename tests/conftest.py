"""Test setup for tiptoc."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def heading(level: int, *texts: str) -> dict[str, Any]:
    """Build a tiptap heading node with one text run per argument."""
    return {
        "type": "heading",
        "attrs": {"level": level},
        "content": [{"type": "text", "text": text} for text in texts],
    }


def divider(section_type: str) -> dict[str, Any]:
    return {"type": "sectionDivider", "attrs": {"sectionType": section_type}}


def paragraph(text: str) -> dict[str, Any]:
    return {"type": "paragraph", "content": [{"type": "text", "text": text}]}


@pytest.fixture
def simple_document() -> dict[str, Any]:
    """Two chapters, the first with a subsection, plus body paragraphs."""
    return {
        "type": "doc",
        "content": [
            heading(1, "Intro"),
            paragraph("Opening words."),
            heading(2, "Background"),
            paragraph("Some history."),
            heading(1, "Methods"),
        ],
    }


@pytest.fixture
def editor_document() -> dict[str, Any]:
    """A document split into editor sections by dividers."""
    return {
        "type": "doc",
        "content": [
            divider("introduction"),
            heading(1, "Preface"),
            divider("maintext"),
            heading(1, "Chapter One"),
            heading(2, "First Steps"),
            heading(1, "Chapter Two"),
            divider("bibliography"),
            heading(1, "Sources"),
        ],
    }
