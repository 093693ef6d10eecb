"""
Runtime configuration for the lens-ocr command line tool.

Everything is env-driven. A .env file next to this package is loaded first
(for local overrides); real environment variables win over it.
Nothing is persisted between invocations.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load lens_ocr/.env if it exists. Missing file is silently skipped.
_env_path = Path(__file__).resolve().parent / ".env"
load_dotenv(_env_path)

DEFAULT_UPLOAD_URL = "https://lens.google.com/v3/upload"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Linux; Android 13; RMX3771) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/121.0.6167.144 Mobile Safari/537.36"
)
DEFAULT_SOCS_COOKIE = "CAESEwgDEgk0ODE3Nzk3MjQaAmVuIAEaBgiA_LyaBg"


def _timeout(raw: str) -> float | None:
    raw = raw.strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise RuntimeError(f"LENS_TIMEOUT_SECONDS must be a number, got {raw!r}") from None


UPLOAD_URL = os.environ.get("LENS_UPLOAD_URL", "").strip() or DEFAULT_UPLOAD_URL
USER_AGENT = os.environ.get("LENS_USER_AGENT", "").strip() or DEFAULT_USER_AGENT
SOCS_COOKIE = os.environ.get("LENS_SOCS_COOKIE", "").strip() or DEFAULT_SOCS_COOKIE

# None means "no timeout", same as a bare requests.post call.
TIMEOUT = _timeout(os.environ.get("LENS_TIMEOUT_SECONDS", ""))

LOG_LEVEL = os.environ.get("LENS_OCR_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
