"""Extract text from images with Google Lens."""

__version__ = "0.1.0"
