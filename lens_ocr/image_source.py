"""
Image acquisition: a file on disk or the current clipboard snapshot.

Images are always handed on as RGBA so the rest of the pipeline only has to
deal with one pixel layout.
"""

import logging
from pathlib import Path

from PIL import Image, ImageGrab, UnidentifiedImageError

from .errors import BufferSizeError, ClipboardEmptyError, ClipboardReadError, ImageDecodeError

logger = logging.getLogger(__name__)

CHANNELS = 4  # RGBA


def validate_buffer(image: Image.Image) -> Image.Image:
    """Ensure the raw pixel buffer is exactly width * height * 4 bytes."""
    width, height = image.size
    expected = width * height * CHANNELS
    actual = len(image.tobytes())
    if image.mode != "RGBA" or actual != expected:
        raise BufferSizeError(
            f"Clipboard image buffer is {actual} bytes ({image.mode}), "
            f"expected {expected} for {width}x{height} RGBA"
        )
    return image


def load_image(path: str | Path) -> Image.Image:
    """
    Decode an image file into an RGBA PIL Image.

    Raises ImageDecodeError if the file can't be read or isn't an image.
    """
    path = Path(path)
    try:
        with Image.open(path) as image:
            image.load()
            rgba = image.convert("RGBA")
    except (OSError, UnidentifiedImageError, ValueError, Image.DecompressionBombError) as exc:
        raise ImageDecodeError(f"Could not open image {path}: {exc}") from exc

    logger.debug("Loaded %s (%dx%d)", path, rgba.width, rgba.height)
    return rgba


def grab_clipboard_image() -> Image.Image:
    """
    Snapshot the clipboard as an RGBA image.

    A file-manager copy puts a list of paths on the clipboard; the first one
    that decodes is used.
    """
    try:
        data = ImageGrab.grabclipboard()
    except Exception as exc:
        raise ClipboardReadError(f"Could not read image from clipboard: {exc}") from exc

    if data is None:
        raise ClipboardEmptyError("Clipboard does not contain an image")

    if isinstance(data, Image.Image):
        return validate_buffer(data.convert("RGBA"))

    if isinstance(data, list):
        for entry in data:
            try:
                return validate_buffer(load_image(entry))
            except ImageDecodeError as exc:
                logger.debug("Skipping clipboard file %s: %s", entry, exc)

    raise ClipboardEmptyError("Clipboard does not contain an image")


def acquire(path: str | Path | None = None) -> Image.Image:
    """Load from path when given, otherwise from the clipboard."""
    if path is not None:
        return load_image(path)
    return grab_clipboard_image()
