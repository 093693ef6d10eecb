"""
Recognized-text extraction from the Lens HTML response.

The page injects its data through a script call:

    >AF_initDataCallback({key: 'ds:1', hash: '...', data: [...]});</script>

The argument is a JavaScript object literal (unquoted keys, single quotes),
so it is parsed as JSON5. Recognized lines live at data[3][4][0][0].
"""

import logging
import re

import json5

from .errors import PayloadNotFoundError, PayloadParseError, PayloadShapeError
from .output import join_lines

logger = logging.getLogger(__name__)

_PAYLOAD_RE = re.compile(r">AF_initDataCallback\((\{key: 'ds:1'.*?)\);</script>")

# data[3][4][0]
_TEXT_PATH = (3, 4, 0)


def find_payload(html: str) -> str:
    match = _PAYLOAD_RE.search(html)
    if match is None:
        raise PayloadNotFoundError(
            "Could not find object data in the Lens response (page layout changed or request blocked)"
        )
    return match.group(1)


def parse_payload(blob: str):
    try:
        return json5.loads(blob)
    except ValueError as exc:
        raise PayloadParseError(f"Could not parse Lens object data: {exc}") from exc


def _text_blocks(document) -> list:
    if not isinstance(document, dict) or "data" not in document:
        raise PayloadShapeError("Lens object data has no 'data' key")

    node = document["data"]
    walked = "data"
    if not isinstance(node, list):
        raise PayloadShapeError(f"Could not find OCR data: {walked} is not an array")
    for index in _TEXT_PATH:
        if index >= len(node):
            raise PayloadShapeError(f"Could not find OCR data: {walked}[{index}] is missing")
        node = node[index]
        walked = f"{walked}[{index}]"
        if not isinstance(node, list):
            raise PayloadShapeError(f"Could not find OCR data: {walked} is not an array")
    return node


def lines_from_document(document) -> list[str]:
    blocks = _text_blocks(document)
    if not blocks:
        # Lens found no text.
        return []

    first = blocks[0]
    if isinstance(first, str):
        # Lines inlined directly at data[3][4][0].
        fragments = blocks
    elif isinstance(first, list):
        fragments = first
    else:
        raise PayloadShapeError(
            f"Could not find OCR data: data[3][4][0][0] is {type(first).__name__}, not an array"
        )

    # Metadata entries are interleaved with the text; keep strings only.
    return [f for f in fragments if isinstance(f, str)]


def extract_lines(html: str) -> list[str]:
    lines = lines_from_document(parse_payload(find_payload(html)))
    logger.debug("Extracted %d line(s)", len(lines))
    return lines


def extract_text(html: str) -> str:
    """Recognized text, one fragment per line, trailing whitespace trimmed."""
    return join_lines(extract_lines(html))
