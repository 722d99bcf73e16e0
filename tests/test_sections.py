"""Tests for section slicing and heading collection."""

from __future__ import annotations

import pytest

from conftest import divider, heading, paragraph
from tiptoc.exceptions import ParseError
from tiptoc.sections import (
    HeadingRecord,
    collect_headings,
    content_items,
    extract_editor_sections,
    extract_heading_text,
    extract_section,
)


class TestExtractSection:
    """Tests for extract_section function."""

    def test_slices_between_dividers(self, editor_document: dict) -> None:
        """Nodes after the matching divider up to the next divider are returned."""
        section = extract_section(editor_document, "maintext")

        assert section == [
            heading(1, "Chapter One"),
            heading(2, "First Steps"),
            heading(1, "Chapter Two"),
        ]

    def test_last_section_runs_to_end(self, editor_document: dict) -> None:
        """The final section extends to the end of the document."""
        assert extract_section(editor_document, "bibliography") == [heading(1, "Sources")]

    def test_accepts_node_list(self, editor_document: dict) -> None:
        """A bare node list works like a document."""
        nodes = editor_document["content"]
        assert extract_section(nodes, "introduction") == [heading(1, "Preface")]

    def test_missing_section(self, editor_document: dict) -> None:
        """An unknown section yields nothing."""
        assert extract_section(editor_document, "appendix") == []

    def test_malformed_input(self) -> None:
        """Unrecognized input yields nothing rather than raising."""
        assert extract_section(42, "maintext") == []
        assert extract_section({"type": "doc"}, "maintext") == []

    def test_ignores_dividers_without_section_type(self) -> None:
        """Dividers lacking a string sectionType are ordinary nodes."""
        nodes = [
            divider("maintext"),
            paragraph("kept"),
            {"type": "sectionDivider", "attrs": {}},
            paragraph("also kept"),
        ]

        assert extract_section(nodes, "maintext") == nodes[1:]

    def test_editor_sections(self, editor_document: dict) -> None:
        """All three editor sections are extracted."""
        sections = extract_editor_sections(editor_document)

        assert set(sections) == {"introduction", "maintext", "bibliography"}
        assert len(sections["maintext"]) == 3


class TestContentItems:
    """Tests for content_items function."""

    def test_document_and_list(self) -> None:
        """Mappings expose their content; lists pass through."""
        nodes = [paragraph("x")]
        assert content_items({"content": nodes}) == nodes
        assert content_items(nodes) is nodes

    def test_json_string(self) -> None:
        """JSON strings are decoded first."""
        assert content_items('{"type": "doc", "content": []}') == []

    @pytest.mark.parametrize("document", [3.5, {"content": None}, "[oops"])
    def test_rejects_malformed(self, document: object) -> None:
        """Unrecognized structures raise ParseError."""
        with pytest.raises(ParseError):
            content_items(document)


class TestHeadingText:
    """Tests for extract_heading_text function."""

    def test_joins_runs(self) -> None:
        """Runs are joined with spaces and trimmed."""
        assert extract_heading_text([{"text": "Hello"}, {"text": "world "}]) == "Hello world"

    def test_runs_without_text(self) -> None:
        """Runs lacking text contribute nothing."""
        assert extract_heading_text([{"type": "hardBreak"}, {"text": "Title"}]) == "Title"

    @pytest.mark.parametrize("content", [None, "text", [], [{"text": "  "}]])
    def test_placeholder(self, content: object) -> None:
        """Missing or blank content is named 'Nameless'."""
        assert extract_heading_text(content) == "Nameless"


class TestCollectHeadings:
    """Tests for collect_headings function."""

    def test_records_level_text_and_position(self) -> None:
        """Headings keep their document position."""
        items = [paragraph("intro"), heading(1, "A"), heading(3, "B"), heading(2, "C")]

        records = collect_headings(items, max_level=2)

        assert records == [
            HeadingRecord(level=1, text="A", position=1),
            HeadingRecord(level=2, text="C", position=3),
        ]

    def test_invalid_level_raises(self) -> None:
        """Headings without an integer level are malformed."""
        with pytest.raises(ParseError):
            collect_headings([{"type": "heading", "attrs": {"level": True}, "content": [{"text": "x"}]}], max_level=3)
        with pytest.raises(ParseError):
            collect_headings([{"type": "heading", "content": [{"text": "x"}]}], max_level=3)

    def test_out_of_range_level_is_skipped(self) -> None:
        """Levels outside 1..max_level drop only that heading."""
        items = [heading(7, "Too deep"), heading(0, "Too shallow"), heading(6, "Deepest")]

        records = collect_headings(items, max_level=6)

        assert records == [HeadingRecord(level=6, text="Deepest", position=2)]
