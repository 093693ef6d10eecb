"""
OCR module — extracts text from images using Google Lens.

The image is downsampled to at most PIXEL_CEILING pixels, encoded as PNG,
uploaded, and the recognized lines are scraped out of the response page.
"""

import logging
import time
from pathlib import Path

from PIL import Image

from . import extractor, image_source, lens_client, normalize

logger = logging.getLogger(__name__)


def extract_text(image: Image.Image) -> str:
    """
    Run Lens OCR on a PIL Image and return the extracted text.

    Args:
        image: RGBA PIL Image (e.g. from clipboard or file).

    Returns:
        Recognized lines joined with newlines, trailing whitespace trimmed.
        Empty string when Lens found no text.
    """
    start = time.time()
    png = normalize.encode_png(normalize.maybe_resize(image))
    html = lens_client.upload_image(png)
    text = extractor.extract_text(html)
    logger.debug("OCR done in %dms (%d characters)", int((time.time() - start) * 1000), len(text))
    return text


def extract_text_from(path: str | Path | None = None) -> str:
    """OCR the image at path, or the clipboard image when path is None."""
    return extract_text(image_source.acquire(path))
