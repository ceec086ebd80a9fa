"""Feed container parsers and the rows -> records pipeline."""

import logging

from ..canonical import CategoryRecord, ProductRecord, RecordKind, canonicalize
from ..detect import detect_format
from ..registry import get_parser
from .common import FeedError, RawRow, UnsupportedFormatError

logger = logging.getLogger(__name__)


def parse_rows(data: bytes, file_name: str, *, kind: RecordKind = "products") -> list[RawRow]:
    feed_format = detect_format(file_name)
    parser = get_parser(feed_format)
    rows = parser(data or b"", kind=kind)
    logger.debug("Parsed %d raw row(s) from %s feed %r.", len(rows), feed_format, file_name)
    return rows


def parse_product_feed(data: bytes, file_name: str) -> list[ProductRecord]:
    return canonicalize(parse_rows(data, file_name, kind="products"), "products")  # type: ignore[return-value]


def parse_category_feed(data: bytes, file_name: str) -> list[CategoryRecord]:
    return canonicalize(parse_rows(data, file_name, kind="categories"), "categories")  # type: ignore[return-value]


__all__ = [
    "FeedError",
    "RawRow",
    "UnsupportedFormatError",
    "parse_category_feed",
    "parse_product_feed",
    "parse_rows",
]
