"""Command line entry point: print search records extracted from an HTML document."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import orjson

from html_extractor.config import DEFAULT_CSS_SELECTOR
from html_extractor.exceptions import ConfigurationError, FetchError
from html_extractor.extractor import ExtractionOptions, run
from html_extractor.fetch import fetch_html

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="html-extractor",
        description="Split an HTML document into search index records.",
    )
    parser.add_argument("path", nargs="?", default="-", help="HTML file to read, '-' for stdin (default)")
    parser.add_argument("--url", help="Fetch the document from this URL instead of reading a file")
    parser.add_argument(
        "--css-selector",
        default=DEFAULT_CSS_SELECTOR,
        help=f"CSS selector of the nodes turned into records (default: {DEFAULT_CSS_SELECTOR!r})",
    )
    parser.add_argument(
        "--tags-to-exclude",
        default=None,
        help="Comma separated tag names removed from each node, e.g. 'script,style'",
    )
    parser.add_argument("--pretty", action="store_true", help="Indent the JSON output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages to stderr")
    return parser


def load_html(*, url: str | None, path: str) -> str:
    if url:
        return asyncio.run(fetch_html(url))
    if path == "-":
        return sys.stdin.read()

    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"HTML file not found: {file_path}")
    return file_path.read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    options = ExtractionOptions(css_selector=args.css_selector, tags_to_exclude=args.tags_to_exclude)
    try:
        html = load_html(url=args.url, path=args.path)
        records = run(html, options)
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return 2
    except (FetchError, FileNotFoundError, UnicodeDecodeError) as exc:
        logger.error("%s", exc)
        return 1

    option = orjson.OPT_INDENT_2 if args.pretty else 0
    payload = orjson.dumps([record.to_index_object() for record in records], option=option)
    sys.stdout.write(payload.decode("utf-8") + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
