"""Pick the feed container format from the file name extension."""

from pathlib import PurePath

from ..errors import UnsupportedFormatError

# Extension -> container format. Content is never sniffed.
_EXTENSION_FORMATS: dict[str, str] = {
    ".csv": "csv",
    ".txt": "csv",
    ".tsv": "csv",
    ".xlsx": "spreadsheet",
    ".xlsm": "spreadsheet",
    ".xls": "spreadsheet",
    ".xml": "xml",
}

FEED_FORMATS = ("csv", "spreadsheet", "xml")


def detect_format(file_name: str) -> str:
    """Return the container format for ``file_name``.

    Raises ``UnsupportedFormatError`` when the extension is not recognized.
    """
    suffix = PurePath(str(file_name or "").strip()).suffix.lower()
    feed_format = _EXTENSION_FORMATS.get(suffix)
    if feed_format is None:
        supported = ", ".join(sorted(_EXTENSION_FORMATS))
        raise UnsupportedFormatError(
            f"Unsupported feed file type {suffix or '(none)'!r}. Supported extensions: {supported}."
        )
    return feed_format


__all__ = ["FEED_FORMATS", "detect_format"]
