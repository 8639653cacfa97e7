"""Command-line interface for the linemark converter.

The CLI reads one markdown document from a file or standard input and writes
the rendered HTML, the token stream, or the block tree.

Configuration Files
-------------------
Options other than INPUT and --out may also come from a configuration file
(``emit``, ``standalone``, ``title``, ``log_level``, ``log_file``,
``trace``). Explicit CLI flags always win over configuration values.

Examples
--------
Convert a file::

    $ linemark notes.md

Write a complete HTML page::

    $ linemark notes.md --standalone --title "Notes" --out notes.html

Inspect the token stream::

    $ cat notes.md | linemark --emit tokens

"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict

from linemark.api import parse, render, tokenize
from linemark.ast.serialization import ast_to_json, tokens_to_json
from linemark.cli.builder import create_parser, get_exit_code_for_exception
from linemark.cli.config import load_config_with_priority, merge_configs, validate_config
from linemark.constants import (
    CONFIG_ENV_VAR,
    DEFAULT_DOCUMENT_TITLE,
    DEFAULT_EMIT_FORMAT,
    DEFAULT_JSON_INDENT,
    DEFAULT_LOG_LEVEL,
    EXIT_SUCCESS,
)
from linemark.exceptions import FileError, LinemarkError
from linemark.logging_utils import configure_logging
from linemark.renderers.base import BaseRenderer
from linemark.renderers.html import wrap_in_document

logger = logging.getLogger(__name__)

__all__ = [
    "main",
    "create_parser",
    "get_exit_code_for_exception",
    "resolve_settings",
]

_DEFAULT_SETTINGS: Dict[str, Any] = {
    "emit": DEFAULT_EMIT_FORMAT,
    "standalone": False,
    "title": DEFAULT_DOCUMENT_TITLE,
    "log_level": DEFAULT_LOG_LEVEL,
    "log_file": None,
    "trace": False,
}


def resolve_settings(parsed_args: argparse.Namespace, config: Dict[str, Any]) -> Dict[str, Any]:
    """Combine defaults, configuration values and explicit CLI flags.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments; unset options are ``None``
    config : dict
        Validated configuration values

    Returns
    -------
    dict
        Effective settings, one entry per configurable option

    """
    explicit = {key: getattr(parsed_args, key) for key in _DEFAULT_SETTINGS if getattr(parsed_args, key) is not None}
    return merge_configs(merge_configs(_DEFAULT_SETTINGS, config), explicit)


def _load_config(parsed_args: argparse.Namespace) -> Dict[str, Any]:
    if parsed_args.no_config:
        return {}
    raw = load_config_with_priority(explicit_path=parsed_args.config, env_var_path=os.environ.get(CONFIG_ENV_VAR))
    return validate_config(raw)


def _setup_logging_level(settings: Dict[str, Any]) -> None:
    # --trace takes precedence over --log-level
    log_level = logging.DEBUG if settings["trace"] else getattr(logging, settings["log_level"].upper())
    configure_logging(log_level, log_file=settings["log_file"], trace_mode=settings["trace"])


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    try:
        return Path(source).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileError(f"Could not read input file: {source}", file_path=source, original_error=e) from e


def _produce_output(markdown_text: str, settings: Dict[str, Any]) -> str:
    tokens = tokenize(markdown_text)
    if settings["emit"] == "tokens":
        return tokens_to_json(tokens, indent=DEFAULT_JSON_INDENT)

    doc = parse(tokens)
    if settings["emit"] == "tree":
        return ast_to_json(doc, indent=DEFAULT_JSON_INDENT)

    html_text = render(doc)
    if settings["standalone"]:
        html_text = wrap_in_document(html_text, title=settings["title"])
    return html_text


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return its exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    try:
        settings = resolve_settings(parsed_args, _load_config(parsed_args))
        _setup_logging_level(settings)

        logger.debug(f"Converting {parsed_args.input} with emit={settings['emit']}")
        output_text = _produce_output(_read_input(parsed_args.input), settings)

        if parsed_args.out:
            BaseRenderer.write_text_output(output_text, parsed_args.out)
            logger.info(f"Wrote output to {parsed_args.out}")
        else:
            print(output_text)
    except (LinemarkError, argparse.ArgumentTypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        print(f"Unexpected error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
