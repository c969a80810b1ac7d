"""Command-line host: render a markdown note file to an HTML fragment."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from mdnote import __version__
from mdnote.config import DEFAULT_ORIGIN, RenderConfig
from mdnote.errors import ConfigError
from mdnote.renderers.html import HtmlRenderer

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2
EXIT_IO_ERROR = 3


def _eprint(msg: str) -> None:
    print(msg, file=sys.stderr)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mdnote",
        description="Render a markdown note to sanitized HTML.",
    )
    parser.add_argument(
        "source",
        nargs="?",
        default="-",
        help="Markdown file to render ('-' or omitted reads stdin).",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write HTML to this file instead of stdout.",
    )
    parser.add_argument(
        "--origin",
        default=DEFAULT_ORIGIN,
        help=f"Origin relative links resolve against (default: {DEFAULT_ORIGIN}).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _write_output(output: str | None, html: str) -> None:
    if output is None:
        sys.stdout.write(html)
        if html:
            sys.stdout.write("\n")
        return
    Path(output).write_text(html, encoding="utf-8")


def cmd_render(args: argparse.Namespace) -> int:
    try:
        config = RenderConfig(origin=args.origin)
    except ConfigError as e:
        _eprint(f"error: {e}")
        return EXIT_CONFIG_ERROR

    try:
        text = _read_source(args.source)
        html = HtmlRenderer(origin=config.origin).render(text)
        _write_output(args.output, html)
    except (OSError, UnicodeDecodeError) as e:
        _eprint(f"error: {e}")
        return EXIT_IO_ERROR

    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    try:
        args = parse_args(list(sys.argv[1:] if argv is None else argv))
    except SystemExit as e:
        # argparse uses SystemExit for --help/--version and parse errors.
        code = e.code
        return int(code) if isinstance(code, int) else EXIT_CONFIG_ERROR

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return cmd_render(args)


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
