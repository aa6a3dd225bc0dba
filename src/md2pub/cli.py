#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2pub/cli.py
"""Command-line interface for md2pub.

Reads a markdown file (or an mdast JSON tree), runs the publishing pipeline
over it and writes the resulting tree as mdast JSON to standard output.

Examples
--------
Publish a markdown post::

    $ md2pub post.md > post.json

Re-run the pipeline over an existing tree::

    $ md2pub tree.json --indent 2

Read from standard input::

    $ cat post.md | md2pub --from markdown

"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from md2pub import __version__
from md2pub.ast.nodes import Document
from md2pub.ast.serialization import ast_to_json, json_to_ast
from md2pub.exceptions import Md2PubError, ParsingError
from md2pub.logging_utils import configure_logging
from md2pub.transforms.pipeline import PublishPipeline

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1

INPUT_FORMATS = ("markdown", "mdast")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``md2pub`` command."""
    parser = argparse.ArgumentParser(
        prog="md2pub",
        description="Rewrite a markdown document tree into its published form and print it as mdast JSON.",
    )
    parser.add_argument("input", nargs="?", help="Input file (markdown or mdast JSON); reads stdin when omitted")
    parser.add_argument(
        "--from",
        dest="input_format",
        choices=INPUT_FORMATS,
        default=None,
        help="Input format (default: 'mdast' for .json files, otherwise 'markdown')",
    )
    parser.add_argument("--indent", type=int, default=None, help="Indentation for the JSON output")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", default=None, help="Also write log output to this file")
    parser.add_argument("--trace", action="store_true", help="Enable trace mode with timestamps and logger names")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    # --trace takes precedence over --log-level
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level.upper())
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _resolve_input_format(input_path: Optional[str], requested: Optional[str]) -> str:
    if requested:
        return requested
    if input_path and Path(input_path).suffix.lower() == ".json":
        return "mdast"
    return "markdown"


def _read_input(input_path: Optional[str]) -> str:
    if input_path is None or input_path == "-":
        return sys.stdin.read()
    try:
        return Path(input_path).read_text(encoding="utf-8")
    except OSError as e:
        raise ParsingError(f"Could not read input file {input_path}: {e}", parsing_stage="read", original_error=e) from e


def load_document(text: str, input_format: str) -> Document:
    """Build a document tree from source text.

    Parameters
    ----------
    text : str
        Markdown source or mdast JSON
    input_format : {"markdown", "mdast"}
        How to read ``text``

    Returns
    -------
    Document
        Parsed tree

    """
    if input_format == "mdast":
        return json_to_ast(text)

    from md2pub.parsers.markdown import markdown_to_ast

    return markdown_to_ast(text)


def main(args: list[str] | None = None) -> int:
    """Execute the CLI entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    input_format = _resolve_input_format(parsed_args.input, parsed_args.input_format)
    logger.info("Reading %s as %s", parsed_args.input or "<stdin>", input_format)

    try:
        document = load_document(_read_input(parsed_args.input), input_format)
        state = PublishPipeline().run(document)
    except Md2PubError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    logger.info("Published document: %s", state.summary())
    sys.stdout.write(ast_to_json(document, indent=parsed_args.indent))
    sys.stdout.write("\n")
    return EXIT_SUCCESS
