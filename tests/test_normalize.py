import io

import pytest
from PIL import Image

from lens_ocr import normalize
from lens_ocr.errors import EncodeError
from lens_ocr.normalize import PIXEL_CEILING, encode_png, maybe_resize, target_size


@pytest.mark.parametrize("size", [(1, 1), (640, 480), (2000, 1500), (3000, 1000), (1, 3_000_000)])
def test_target_size_identity_at_or_below_ceiling(size):
    assert target_size(*size) == size


@pytest.mark.parametrize("size", [(4000, 3000), (3001, 1000), (10000, 500), (500, 10000), (1733, 1733)])
def test_target_size_bounded_and_keeps_aspect(size):
    width, height = size
    new_width, new_height = target_size(width, height)

    assert new_width * new_height <= PIXEL_CEILING
    # floor() on each side costs at most one pixel of aspect precision
    assert abs(new_width / new_height - width / height) < 0.05


@pytest.mark.parametrize(
    "size",
    [(1, 5_000_000), (2, 20_000_000), (5_000_000, 1), (20_000_000, 2), (3_000_001, 1)],
)
def test_target_size_extreme_aspect_stays_under_ceiling(size):
    new_width, new_height = target_size(*size)

    assert new_width >= 1 and new_height >= 1
    assert new_width * new_height <= PIXEL_CEILING


def test_target_size_is_deterministic():
    assert target_size(5123, 2871) == target_size(5123, 2871)


def test_large_image_resized_to_about_2000x1500():
    image = Image.new("RGBA", (4000, 3000), (10, 20, 30, 255))

    resized = maybe_resize(image)

    assert abs(resized.width - 2000) <= 1
    assert abs(resized.height - 1500) <= 1
    assert resized.width * resized.height <= PIXEL_CEILING
    assert resized.mode == "RGBA"


def test_small_image_returned_unchanged(rgba_image):
    assert maybe_resize(rgba_image) is rgba_image


def test_encode_png_roundtrips_dimensions(rgba_image):
    data = encode_png(rgba_image)

    assert data.startswith(b"\x89PNG\r\n\x1a\n")
    with Image.open(io.BytesIO(data)) as decoded:
        assert decoded.size == rgba_image.size
        assert decoded.format == "PNG"


def test_encode_png_failure_raises_encode_error(rgba_image, monkeypatch):
    def broken_save(*args, **kwargs):
        raise OSError("disk on fire")

    monkeypatch.setattr(rgba_image, "save", broken_save)

    with pytest.raises(EncodeError, match="disk on fire"):
        normalize.encode_png(rgba_image)
