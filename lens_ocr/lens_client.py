"""
HTTP client for the Google Lens upload endpoint.

One blocking POST per call, no retries. The request mimics the mobile web
client: fixed user agent, consent cookie and hand-built multipart body.
"""

import logging
import time

import requests

from . import config
from .errors import ResponseDecodeError, TransportError, UpstreamStatusError
from .multipart import build_multipart, content_type, timestamp_ms

logger = logging.getLogger(__name__)


def _headers() -> dict:
    return {
        "User-Agent": config.USER_AGENT,
        "Cookie": f"SOCS={config.SOCS_COOKIE}",
        "Content-Type": content_type(),
    }


def _decode_body(resp: requests.Response) -> str:
    try:
        return resp.content.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ResponseDecodeError(f"Lens response is not valid UTF-8: {exc}") from exc


def upload_image(png: bytes, timestamp: int | None = None) -> str:
    """
    Upload PNG bytes to Lens and return the HTML response text.

    The same millisecond timestamp is used for the stcs query parameter and
    the uploaded filename.

    Raises TransportError, UpstreamStatusError or ResponseDecodeError.
    """
    ts = timestamp_ms() if timestamp is None else timestamp
    url = f"{config.UPLOAD_URL}?stcs={ts}"
    body = build_multipart(f"{ts}.png", png)

    logger.debug("POST %s (%d bytes)", url, len(body))
    start = time.time()
    try:
        resp = requests.post(
            url,
            data=body,
            headers=_headers(),
            timeout=config.TIMEOUT,
        )
    except requests.RequestException as exc:
        raise TransportError(f"Could not reach Lens: {exc}") from exc
    elapsed_ms = int((time.time() - start) * 1000)

    if resp.status_code != 200:
        raise UpstreamStatusError(
            f"Google responded with HTTP {resp.status_code}",
            status_code=resp.status_code,
        )

    logger.debug("Lens responded in %dms (%d bytes)", elapsed_ms, len(resp.content))
    return _decode_body(resp)
