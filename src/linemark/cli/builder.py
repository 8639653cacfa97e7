#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linemark/cli/builder.py
"""Argument parser construction and exit code mapping for the linemark CLI.

Options that a configuration file may also set default to ``None`` so the
CLI can tell an explicit flag apart from an unset one; see
:func:`linemark.cli.resolve_settings`.
"""

import argparse

from linemark import __version__
from linemark.constants import (
    EMIT_FORMATS,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_VALIDATION_ERROR,
)
from linemark.exceptions import FileError, ParsingError, RenderingError, ValidationError
from linemark.logging_utils import LOG_LEVEL_CHOICES


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="linemark",
        description="Convert line-oriented markdown to HTML.",
        epilog="Reads standard input when INPUT is omitted or '-'.",
    )

    parser.add_argument("input", nargs="?", default="-", metavar="INPUT", help="Markdown file to convert")
    parser.add_argument("--out", "-o", help="Output file path (default: print to stdout)")

    parser.add_argument(
        "--emit",
        choices=list(EMIT_FORMATS),
        default=None,
        help="What to write: rendered HTML (default), the token stream as JSON, or the block tree as JSON",
    )
    parser.add_argument(
        "--standalone",
        action="store_true",
        default=None,
        help="Wrap the HTML fragment in a complete HTML document",
    )
    parser.add_argument("--title", default=None, help="Document title used with --standalone (default: Document)")

    parser.add_argument(
        "--config",
        help="Path to configuration file (JSON, TOML or YAML). "
        "If not specified, uses LINEMARK_CONFIG or searches for .linemark.* files and "
        "pyproject.toml [tool.linemark] from the current directory upward, then in the home directory.",
    )
    parser.add_argument(
        "--no-config",
        action="store_true",
        dest="no_config",
        help="Disable loading of configuration files. Ignores auto-discovered configs, "
        "LINEMARK_CONFIG environment variable, and any --config flag.",
    )

    parser.add_argument(
        "--log-level",
        choices=list(LOG_LEVEL_CHOICES),
        default=None,
        help="Set logging level for debugging (default: WARNING)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        default=None,
        help="Write log messages to specified file in addition to console output",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        default=None,
        help="Enable trace mode with very verbose logging and per-stage timing information",
    )

    parser.add_argument("--version", "-V", action="version", version=f"linemark {__version__}")

    return parser


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
    if isinstance(exception, (ValidationError, argparse.ArgumentTypeError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    # OutputWriteError is a RenderingError
    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR
