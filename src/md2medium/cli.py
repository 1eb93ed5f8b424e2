#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for md2medium.

Converts one Markdown file into an HTML fragment that can be pasted into (or
imported by) Medium.

Environment Variable Support
----------------------------
``MD2MEDIUM_INLINE_CODE_FORMAT`` sets the default for
``--inline-code-format``. The command-line argument always wins.

Examples
--------
Convert a file and print the HTML::

    $ md2medium post.md

Write to a file with italic inline code::

    $ md2medium post.md -o post.html --inline-code-format italic

Read from stdin and measure table cells with wcwidth::

    $ cat post.md | md2medium - --width-strategy wcwidth

"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from md2medium import __version__
from md2medium.api import convert
from md2medium.constants import (
    DEFAULT_HTML_PASSTHROUGH_MODE,
    DEFAULT_INLINE_CODE_FORMAT_ENV,
    DEFAULT_WIDTH_STRATEGY,
    HTML_PASSTHROUGH_MODES,
    WIDTH_STRATEGIES,
)
from md2medium.exceptions import DependencyError, Md2MediumError, ValidationError
from md2medium.logging_utils import configure_logging
from md2medium.options.medium import InlineCodeFormat, MediumRendererOptions

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4

STDIN_MARKER = "-"


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR

    if isinstance(exception, (ValidationError, ValueError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, (OSError, UnicodeDecodeError)):
        return EXIT_FILE_ERROR

    return EXIT_ERROR


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="md2medium",
        description="Convert Markdown to HTML that Medium's story importer accepts.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"Environment: {DEFAULT_INLINE_CODE_FORMAT_ENV} sets the default inline code format.",
    )

    parser.add_argument("input", help=f"Markdown file to convert ({STDIN_MARKER!r} reads from stdin)")
    parser.add_argument("--out", "-o", dest="out", help="Output file (default: stdout)")

    parser.add_argument(
        "--inline-code-format",
        default=os.environ.get(DEFAULT_INLINE_CODE_FORMAT_ENV, InlineCodeFormat.DOUBLE_QUOTES.value),
        metavar="FORMAT",
        help=MediumRendererOptions.field_help("inline_code_format")
        + ": "
        + ", ".join(member.value for member in InlineCodeFormat),
    )
    parser.add_argument(
        "--width-strategy",
        choices=list(WIDTH_STRATEGIES),
        default=DEFAULT_WIDTH_STRATEGY,
        help=MediumRendererOptions.field_help("width_strategy") + " (default: %(default)s)",
    )
    parser.add_argument(
        "--html-passthrough-mode",
        choices=list(HTML_PASSTHROUGH_MODES),
        default=DEFAULT_HTML_PASSTHROUGH_MODE,
        help=MediumRendererOptions.field_help("html_passthrough_mode") + " (default: %(default)s)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level (default: %(default)s)",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument(
        "--trace", action="store_true", help="Enable trace mode: DEBUG logging with timestamps and logger names"
    )
    parser.add_argument("--version", "-v", action="version", version=f"%(prog)s {__version__}")

    return parser


def _read_input(source: str) -> str:
    if source == STDIN_MARKER:
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _write_output(html: str, destination: Optional[str]) -> None:
    if destination is None:
        sys.stdout.write(html)
        return
    output_path = Path(destination)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html, encoding="utf-8")


def main(args: list[str] | None = None) -> int:
    """Execute the md2medium command.

    Parameters
    ----------
    args : list of str, optional
        Command-line arguments, ``sys.argv[1:]`` when omitted

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    log_level = logging.DEBUG if parsed_args.trace else parsed_args.log_level
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        inline_code_format = InlineCodeFormat.coerce(parsed_args.inline_code_format, "--inline-code-format")
        renderer_options = MediumRendererOptions(
            inline_code_format=inline_code_format,
            width_strategy=parsed_args.width_strategy,
            html_passthrough_mode=parsed_args.html_passthrough_mode,
        )
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        markdown = _read_input(parsed_args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading {parsed_args.input}: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    try:
        html = convert(markdown, inline_code_format, renderer_options=renderer_options)
    except Md2MediumError as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.debug("Unexpected conversion failure", exc_info=True)
        print(f"Unexpected error: {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        _write_output(html, parsed_args.out)
    except OSError as e:
        print(f"Error writing {parsed_args.out}: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    if parsed_args.out:
        logger.info(f"Wrote {len(html)} characters to {parsed_args.out}")
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
