"""Command-line entry point: print the table of contents of a document."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

import httpx

from tiptoc.config import TIPTOC_CONTAINER_WIDTH, TIPTOC_HTTP_TIMEOUT_S, TIPTOC_LOG_LEVEL
from tiptoc.exceptions import FetchError, TiptocError
from tiptoc.html_parser import parse_html_document
from tiptoc.pipeline import DEFAULT_SECTION, TocOptions, generate_toc
from tiptoc.schemas import TocSettings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tiptoc",
        description="Build a numbered, dot-leader table of contents from a tiptap JSON or HTML document.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--file", help="Local document path (.json or .html)")
    source.add_argument("--url", help="URL to fetch the document from")
    parser.add_argument("--levels", type=int, default=3, choices=range(1, 7), help="Deepest heading level to include")
    parser.add_argument(
        "--numbers",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Show formatted heading numbers",
    )
    parser.add_argument("--separator", default="2", help="Number separator code or character: 1 ')', 2 '.', 3 '-'")
    parser.add_argument("--leader", default="1", help="Tab leader code: 0 space, 1 '.', 2 '-', 3 '_'")
    parser.add_argument(
        "--level-format",
        action="append",
        default=[],
        metavar="LEVEL=SCHEME",
        help="Numeral scheme for a level, e.g. 2=lower-alpha (repeatable)",
    )
    parser.add_argument(
        "--indent",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Indent lines by heading level when sizing leaders",
    )
    parser.add_argument("--title", default="Table of Contents", help="TOC title")
    parser.add_argument("--width", type=float, default=TIPTOC_CONTAINER_WIDTH, help="Container width in pixels")
    parser.add_argument(
        "--section",
        default=DEFAULT_SECTION,
        help="Editor section to index; 'all' indexes the whole document",
    )
    parser.add_argument("--format", choices=("outline", "json"), default="outline", dest="output_format")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else TIPTOC_LOG_LEVEL)

    try:
        settings = _settings_from_args(args)
        text = load_document(url=args.url, file_path=args.file)
        document = parse_document_text(text, hint=args.url or args.file or "")
    except (TiptocError, OSError, ValueError) as exc:
        print(f"tiptoc: {exc}", file=sys.stderr)
        return 1

    result = generate_toc(
        document,
        settings,
        options=TocOptions(
            section=None if args.section == "all" else args.section,
            container_width=args.width,
        ),
    )

    if args.output_format == "json":
        print(
            json.dumps(
                {
                    "tree": [node.model_dump(by_alias=True) for node in result.tree],
                    "document": result.document,
                },
                indent=2,
                ensure_ascii=False,
            )
        )
    else:
        print(result.summary)
        if result.outline:
            print()
            print(result.outline)
    return 0


def _settings_from_args(args: argparse.Namespace) -> TocSettings:
    formats: dict[str, Any] = {}
    for entry in args.level_format:
        level, sep, scheme = entry.partition("=")
        if not sep or not level.strip().isdigit() or not 1 <= int(level) <= 6:
            raise ValueError(f"Invalid --level-format {entry!r}; expected LEVEL=SCHEME")
        formats[f"level{int(level)}_format"] = scheme.strip()
    return TocSettings(
        levels=args.levels,
        show_heading_numbers=args.numbers,
        number_separator=args.separator,
        tab_leader_format=args.leader,
        indent_levels=args.indent,
        title=args.title,
        **formats,
    )


def load_document(*, url: str | None, file_path: str | None) -> str:
    """Read document text from a URL or a local file.

    Raises:
        FetchError: If the URL cannot be fetched.
        FileNotFoundError: If the local file does not exist.
    """
    if url:
        try:
            response = httpx.get(url, follow_redirects=True, timeout=TIPTOC_HTTP_TIMEOUT_S)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise FetchError(f"Failed to fetch {url}: {exc}") from exc
        logger.debug("Fetched %d bytes from %s", len(response.content), url)
        return response.text

    path = Path(file_path or "")
    if not path.is_file():
        raise FileNotFoundError(f"Document file not found: {path}")
    return path.read_text(encoding="utf-8")


def parse_document_text(text: str, *, hint: str = "") -> Any:
    """Decode JSON documents, converting HTML ones to tiptap content."""
    stripped = text.lstrip()
    if hint.lower().endswith((".html", ".htm")) or stripped.startswith("<"):
        return parse_html_document(text)
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Document is neither JSON nor HTML: {exc}") from exc


if __name__ == "__main__":
    sys.exit(main())
