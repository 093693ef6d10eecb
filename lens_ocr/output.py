"""Result delivery: stdout or the system clipboard."""

import logging
from typing import Iterable

import pyperclip

from .errors import ClipboardWriteError

logger = logging.getLogger(__name__)


def join_lines(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines).rstrip()


def print_text(text: str):
    print(f"{text}\n")


def copy_text(text: str):
    """Replace the clipboard contents with text."""
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        raise ClipboardWriteError(f"Could not set clipboard contents: {exc}") from exc
    logger.debug("Copied %d characters to clipboard", len(text))
