"""Command line entry point: quote a file or stdin as a markdown blockquote."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .blockquote import Blockquote
from .config import load_settings
from .exceptions import ConfigurationError
from .logging_config import setup_logging

logger = logging.getLogger("blockquote_formatter.cli")

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_CONFIG_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blockquote",
        description="Format text as a markdown blockquote",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Defaults come from BLOCKQUOTE_* environment variables (or a .env file).

Examples:
  %(prog)s notes.txt
  %(prog)s --soft-limit 81 --hard-limit 10 < message.txt
  %(prog)s --line-width 40 --prefix '>' notes.txt
        """,
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="Input file (default: read stdin)",
    )
    parser.add_argument(
        "--soft-limit",
        type=int,
        default=None,
        help="Target maximum rendered length, prefix included",
    )
    parser.add_argument(
        "--hard-limit",
        type=int,
        default=None,
        help="Extra characters allowed past the soft limit to finish a word",
    )
    parser.add_argument(
        "--prefix",
        default=None,
        help="Blockquote marker for every line (default: '> ')",
    )
    parser.add_argument(
        "--line-width",
        type=int,
        default=None,
        help="Wrap lines at this rendered width without splitting words",
    )
    parser.add_argument(
        "--no-ellipsis",
        action="store_true",
        help="Do not mark truncated output with an ellipsis",
    )
    parser.add_argument(
        "--keep-existing-prefix",
        action="store_true",
        help="Quote already-quoted input again instead of re-quoting it",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Override BLOCKQUOTE_LOG_LEVEL",
    )
    parser.add_argument(
        "--log-format",
        choices=["text", "json"],
        default=None,
        help="Override BLOCKQUOTE_LOG_FORMAT",
    )
    return parser


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point. Returns the process exit code."""
    args = _build_parser().parse_args(argv)

    try:
        settings = load_settings()
        setup_logging(args.log_level or settings.log_level, args.log_format or settings.log_format)
        config = settings.to_config(
            soft_limit=args.soft_limit,
            hard_limit=args.hard_limit,
            prefix=args.prefix,
            line_width=args.line_width,
            with_ellipsis=False if args.no_ellipsis else None,
            strip_existing_prefix=False if args.keep_existing_prefix else None,
        )
    except ConfigurationError as e:
        print(f"[Error] {e.message}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    try:
        text = _read_input(args.file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"[Error] Cannot read {args.file}: {e}", file=sys.stderr)
        return EXIT_IO_ERROR

    blockquote = Blockquote(text, config=config)
    output = blockquote.render()
    if blockquote.truncated:
        logger.info("Input truncated to fit the configured limits", extra={"source": args.file})

    if output:
        sys.stdout.write(output + "\n")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
