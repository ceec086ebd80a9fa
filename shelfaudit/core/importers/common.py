from typing import Any

from ..errors import FeedError, UnsupportedFormatError

RawRow = dict[str, Any]

TEXT_ENCODINGS = ("utf-8-sig", "utf-8", "cp1250")


def decode_text_bytes(data: bytes) -> str:
    for encoding in TEXT_ENCODINGS:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue
    raise FeedError("Feed must be UTF-8 or Windows-1250 encoded.")


def normalize_newlines(text: str) -> str:
    return text.replace("_x000D_", "").replace("\r\n", "\n").replace("\r", "\n")


def is_empty_row(row: RawRow) -> bool:
    for value in row.values():
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        if isinstance(value, (list, tuple)) and not value:
            continue
        return False
    return True


__all__ = [
    "FeedError",
    "RawRow",
    "TEXT_ENCODINGS",
    "UnsupportedFormatError",
    "decode_text_bytes",
    "is_empty_row",
    "normalize_newlines",
]
