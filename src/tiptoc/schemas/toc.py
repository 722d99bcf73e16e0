"""Table-of-contents tree and output models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel


class TocNode(BaseModel):
    """A heading placed in the table-of-contents tree.

    Attributes:
        id: Structural id, always dot-joined decimal (e.g. ``"2.1"``).
        display_id: Formatted id shown to readers, present only when
            heading numbers are enabled.
        name: Plain heading text.
        level: Heading level copied from the source document.
        children: Nested headings, owned by this node.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    display_id: str | None = None
    name: str
    level: int = Field(..., ge=1, le=6)
    children: list["TocNode"] = Field(default_factory=list)

    @computed_field(alias="combinedLabel")
    @property
    def combined_label(self) -> str:
        if self.display_id:
            return f"{self.display_id} - {self.name}"
        return self.name


class TextRun(BaseModel):
    """A styled run of text inside a TOC line."""

    text: str
    bold: bool = False
    italic: bool = False
    font_size: int = 12
    font_family: str | None = None
    letter_spacing: str | None = None

    def to_node(self) -> dict[str, Any]:
        """Return the run as a tiptap text node with marks."""
        marks: list[dict[str, Any]] = []
        if self.bold:
            marks.append({"type": "bold"})
        if self.italic:
            marks.append({"type": "italic"})
        attrs: dict[str, Any] = {"fontSize": f"{self.font_size}pt"}
        if self.font_family:
            attrs["fontFamily"] = self.font_family
        if self.letter_spacing is not None:
            attrs["letterSpacing"] = self.letter_spacing
        marks.append({"type": "textStyle", "attrs": attrs})
        return {"type": "text", "text": self.text, "marks": marks}


class TocLine(BaseModel):
    """One rendered TOC entry: title, leader and page-number slot."""

    level: int
    title_run: TextRun
    leader_run: TextRun
    trailing_run: TextRun

    @property
    def leader_count(self) -> int:
        return len(self.leader_run.text)

    def to_node(self) -> dict[str, Any]:
        return {
            "type": "paragraph",
            "attrs": {"class": "toc-line", "level": self.level},
            "content": [
                self.title_run.to_node(),
                self.leader_run.to_node(),
                self.trailing_run.to_node(),
            ],
        }


class TocResult(BaseModel):
    """Final output of the TOC pipeline."""

    tree: list[TocNode]
    document: dict[str, Any]
    outline: str
    summary: str
