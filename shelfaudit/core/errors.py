class FeedError(ValueError):
    """Raised when a feed container cannot be decoded at all."""


class UnsupportedFormatError(FeedError):
    """Raised when the file name does not map to a known container format."""


__all__ = ["FeedError", "UnsupportedFormatError"]
