"""Command-line entry point for shapegen."""

from __future__ import annotations

import argparse
from typing import Sequence

from .codegen.cli_integration import add_codegen_args, handle_codegen_command
from .logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``shapegen`` command."""
    parser = argparse.ArgumentParser(
        prog="shapegen",
        description="Generate code from Smithy models (JSON AST)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  shapegen model.json
  shapegen -l ts -o models.ts model.json
  shapegen --stdin < model.json
  shapegen --list-languages
        """.strip(),
    )
    add_codegen_args(parser)
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI.

    Args:
        argv: Argument list, defaults to ``sys.argv[1:]``.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, verbose=args.verbose)
    logger.debug("Parsed arguments: %s", args)
    return handle_codegen_command(args)


if __name__ == "__main__":
    raise SystemExit(main())
