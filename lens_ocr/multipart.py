"""
Hand-built multipart/form-data body for the Lens upload endpoint.

The boundary is fixed and shared with the Content-Type header; the service
expects exactly this single-part layout.
"""

import time

BOUNDARY = "ZPJQvnUMIqajI5LbS8cc5w"


def timestamp_ms() -> int:
    return int(time.time() * 1000)


def content_type() -> str:
    return f"multipart/form-data; boundary={BOUNDARY}"


def build_multipart(filename: str, image: bytes) -> bytes:
    """
    Wrap PNG bytes in a one-part form body (field "encoded_image").

    The filename is not escaped; callers pass "<timestamp>.png".
    """
    boundary = BOUNDARY.encode("ascii")
    parts = [
        b"--", boundary, b"\r\n",
        b"Content-Type: image/png\r\n",
        b'Content-Disposition: form-data; name="encoded_image"; ',
        b'filename="', filename.encode("utf-8"), b'"\r\n\r\n',
        image,
        b"\r\n--", boundary, b"--\r\n",
    ]
    return b"".join(parts)
