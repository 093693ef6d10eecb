#!/usr/bin/env python3
"""
lens-ocr — extract text from an image with Google Lens.

Usage:
    lens-ocr <path>               OCR an image file, print the text
    lens-ocr clipboard [path]     OCR a file (or the clipboard image),
                                  put the text on the clipboard
"""

import argparse
import logging
import logging.config

from . import config, ocr, output
from .errors import LensOCRError

CLIPBOARD_COMMAND = "clipboard"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lens-ocr",
        description="Recognize text in an image using Google Lens.",
    )
    parser.add_argument(
        "target",
        help=f"Image path, or '{CLIPBOARD_COMMAND}' to copy the result to the clipboard",
    )
    parser.add_argument(
        "path",
        nargs="?",
        help=f"Image path for '{CLIPBOARD_COMMAND}' mode (default: clipboard image)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log pipeline details to stderr",
    )
    return parser


def parse_args(argv=None) -> argparse.Namespace:
    """Parse argv into a namespace with clipboard (bool) and path (str | None)."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.target == CLIPBOARD_COMMAND:
        args.clipboard = True
    else:
        if args.path is not None:
            parser.error(f"unexpected argument {args.path!r} (did you mean '{CLIPBOARD_COMMAND} <path>'?)")
        args.clipboard = False
        args.path = args.target
    return args


def _configure_logging(verbose: bool):
    level = "DEBUG" if verbose else config.LOG_LEVEL
    if not isinstance(logging.getLevelName(level), int):
        level = "WARNING"
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "verbose": {
                "format": "{levelname} {asctime} {module} {message}",
                "style": "{",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "verbose",
                "stream": "ext://sys.stderr",
            },
        },
        "root": {
            "handlers": ["console"],
            "level": level,
        },
        "loggers": {
            "urllib3": {
                "level": "DEBUG" if verbose else "WARNING",
            },
        },
    })


def run(args: argparse.Namespace):
    text = ocr.extract_text_from(args.path)
    if args.clipboard:
        output.copy_text(text)
    else:
        output.print_text(text)


def main(argv=None):
    args = parse_args(argv)
    _configure_logging(args.verbose)
    try:
        run(args)
    except LensOCRError as exc:
        raise SystemExit(f"OCR failed: {exc}")


if __name__ == "__main__":
    main()
