#!/usr/bin/env python3
"""Command-line interface for md-to-html."""

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .config import get_settings
from .converter import convert_file
from .logging_config import setup_logging

logger = logging.getLogger("md_to_html")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="md-to-html",
        description="Convert markdown with mermaid diagrams to HTML",
    )
    parser.add_argument("input", help="Input markdown file")
    parser.add_argument(
        "-o",
        "--output",
        help="Output HTML file path (default: input filename with .html extension in same directory)",
    )
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    """
    Run one conversion.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = build_parser().parse_args(argv)

    settings = get_settings()
    setup_logging(settings["log_level"], development=settings["development"])

    input_path = Path(args.input)
    if not input_path.is_file():
        logger.error(f"Input file not found: {input_path}", extra={"input": str(input_path)})
        return 1

    try:
        convert_file(input_path, args.output, mmdc_path=settings["mmdc_path"], logger=logger)
    except Exception as e:
        logger.error(f"Error during conversion: {e}", extra={"error": str(e)})
        return 1

    return 0


def run() -> None:
    """Console script entry point."""
    try:
        exit_code = main()
    except Exception:
        logger.critical("Fatal error occurred", exc_info=True)
        exit_code = 1
    sys.exit(exit_code)


if __name__ == "__main__":
    run()
