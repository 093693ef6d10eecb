"""Downsampling and PNG encoding before upload."""

import io
import logging
import math

from PIL import Image

from .errors import EncodeError

logger = logging.getLogger(__name__)

# Max pixels per upload; larger images are downsampled.
PIXEL_CEILING = 3_000_000


def target_size(width: int, height: int, ceiling: int = PIXEL_CEILING) -> tuple[int, int]:
    """Size to resample to, keeping the aspect ratio. Unchanged at or below ceiling."""
    if width * height <= ceiling:
        return width, height

    aspect_ratio = width / height
    new_width = max(1, int(math.sqrt(ceiling * aspect_ratio)))
    # A side clamped to 1px must not push the other past the ceiling.
    new_height = max(1, min(int(new_width / aspect_ratio), ceiling // new_width))
    new_width = min(new_width, ceiling // new_height)
    return new_width, new_height


def maybe_resize(image: Image.Image, ceiling: int = PIXEL_CEILING) -> Image.Image:
    size = target_size(image.width, image.height, ceiling)
    if size == image.size:
        return image

    logger.debug("Resizing %dx%d -> %dx%d", image.width, image.height, *size)
    return image.resize(size, Image.LANCZOS)


def encode_png(image: Image.Image) -> bytes:
    buf = io.BytesIO()
    try:
        image.save(buf, format="PNG")
    except (OSError, ValueError) as exc:
        raise EncodeError(f"Could not encode image as PNG: {exc}") from exc
    data = buf.getvalue()
    logger.debug("Encoded PNG: %d bytes", len(data))
    return data
