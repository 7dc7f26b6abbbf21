from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from mdview.config import ViewConfig
from mdview.models.note import Note
from mdview.services.file_service import FileService
from mdview.services.markdown_service import MarkdownService
from mdview.ui.preview_page import PreviewPage
from mdview.ui.theme import THEMES, get_theme


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdview",
        description="Render a markdown note into display markup.",
    )
    parser.add_argument("input", help="Markdown file to render, or '-' for stdin.")
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write to this path (.html is enforced) instead of stdout.",
    )
    parser.add_argument(
        "--compact", action="store_true", default=None, help="Use the compact display mode."
    )
    parser.add_argument(
        "--standalone",
        action="store_true",
        help="Emit a full HTML page with the stylesheet instead of the container only.",
    )
    parser.add_argument("--theme", choices=sorted(THEMES), default=None)
    parser.add_argument(
        "--escape-html",
        action="store_true",
        default=None,
        help="Escape &, < and > in the source before rendering.",
    )
    parser.add_argument(
        "--protect-code",
        action="store_true",
        default=None,
        help="Keep code span and code block bodies out of later formatting rules.",
    )
    parser.add_argument(
        "--highlight-code",
        action="store_true",
        default=None,
        help="Colour fenced code blocks with pygments (implies --standalone).",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def _load_note(source: str, files: FileService) -> Note:
    if source == "-":
        return Note.from_stdin(sys.stdin.read())
    return files.read(Path(source))


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = ViewConfig().with_overrides(
        escape_html=args.escape_html,
        protect_code=args.protect_code,
        theme=args.theme,
        highlight_code=args.highlight_code,
        compact=args.compact,
    )
    try:
        theme = get_theme(config.theme)
    except ValueError as exc:
        print(f"mdview: error: {exc}", file=sys.stderr)
        return 2

    files = FileService(encoding=config.encoding)
    service = MarkdownService(options=config.render)
    try:
        note = _load_note(args.input, files)
    except OSError as exc:
        print(f"mdview: error: {exc}", file=sys.stderr)
        return 1

    if args.standalone or config.highlight_code:
        page = PreviewPage(
            service=service, theme=theme, highlight_code=config.highlight_code
        )
        output = page.build(note.body, title=note.title, compact=config.compact)
    else:
        output = service.to_html(note.body, compact=config.compact) + "\n"

    if args.output is None:
        sys.stdout.write(output)
        return 0
    try:
        target = files.write_rendered(output, Path(args.output))
    except OSError as exc:
        print(f"mdview: error: {exc}", file=sys.stderr)
        return 1
    logging.getLogger(__name__).info("Wrote %s", target)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
