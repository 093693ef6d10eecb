"""
Error taxonomy for the OCR pipeline.

Every failure is terminal for the invocation; the CLI reports the message
and exits non-zero.
"""


class LensOCRError(RuntimeError):
    """Base class for all pipeline failures."""


# --- image acquisition

class ImageDecodeError(LensOCRError):
    pass


class ClipboardEmptyError(LensOCRError):
    pass


class ClipboardReadError(LensOCRError):
    pass


class BufferSizeError(LensOCRError):
    pass


# --- normalization

class EncodeError(LensOCRError):
    pass


# --- transport

class TransportError(LensOCRError):
    pass


class UpstreamStatusError(LensOCRError):
    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class ResponseDecodeError(LensOCRError):
    pass


# --- extraction

class PayloadNotFoundError(LensOCRError):
    pass


class PayloadParseError(LensOCRError):
    pass


class PayloadShapeError(LensOCRError):
    pass


# --- output

class ClipboardWriteError(LensOCRError):
    pass
