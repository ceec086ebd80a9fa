"""Container format detection."""

from .format import FEED_FORMATS, detect_format

__all__ = ["FEED_FORMATS", "detect_format"]
