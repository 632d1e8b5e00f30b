"""Command-line entry point for webcite."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .config import CiteConfig, DEFAULT_TIMEOUT
from .dates import DateParseError
from .fetch import FetchError
from .pipeline import cite_url
from .render import CitationStyle, UnknownDialectError

logger = logging.getLogger("webcite.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a BibTeX or BibLaTeX reference for a web page from its metadata.",
    )
    parser.add_argument(
        "--url",
        default="",
        help="The URL of the page to get the information of",
    )
    parser.add_argument(
        "--bibtex",
        action="store_true",
        help="Generate a BibTeX (@misc) reference",
    )
    parser.add_argument(
        "--biblatex",
        action="store_true",
        help="Generate a BibLaTeX (@online) reference",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="HTTP timeout in seconds",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.bibtex and args.biblatex:
        parser.exit(1, "You can't use both bibtex and biblatex\n")
    if not args.bibtex and not args.biblatex:
        parser.exit(1, "You must use either bibtex or biblatex\n")
    if not args.url:
        parser.exit(1, "url is required\n")
    return args


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    style = CitationStyle.BIBTEX if args.bibtex else CitationStyle.BIBLATEX
    config = CiteConfig(timeout=args.timeout)
    try:
        reference = cite_url(args.url, style, config)
    except FetchError as exc:
        logger.error("%s", exc)
        sys.exit(1)
    except (DateParseError, UnknownDialectError) as exc:
        logger.error(
            "error while trying to generate the reference of page %s: %s",
            args.url,
            exc,
        )
        sys.exit(1)
    print(reference)


if __name__ == "__main__":
    main()
