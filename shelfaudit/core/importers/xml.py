"""Tolerant markup feed parser.

Feeds exported by shop platforms are frequently malformed (unescaped
ampersands, truncated tails, stray HTML inside descriptions), so items are
located with a structural regex scan instead of a strict XML parser.
"""

import html
import re

from .common import RawRow, decode_text_bytes, normalize_newlines

PRODUCT_ITEM_TAGS = ("SHOPITEM", "PRODUCT", "ITEM", "product", "item", "offer")
CATEGORY_ITEM_TAGS = ("CATEGORY", "category")

PRODUCT_FIELD_TAGS = (
    "CODE",
    "ITEM_ID",
    "NAME",
    "PRODUCTNAME",
    "SHORT_DESCRIPTION",
    "DESCRIPTION",
    "META_TITLE",
    "SEO_TITLE",
    "META_DESCRIPTION",
    "CATEGORYTEXT",
    "DEFAULT_CATEGORY",
    "PRICE",
    "PRICE_VAT",
    "STANDARD_PRICE",
    "PURCHASE_PRICE",
    "AVAILABILITY",
    "AVAILABILITY_IN_STOCK",
    "AVAILABILITY_OUT_OF_STOCK",
    "DELIVERY_DATE",
    "DELIVERY_DAYS",
    "STOCK",
    "AMOUNT",
    "EAN",
    "MANUFACTURER",
    "BRAND",
    "WARRANTY",
    "WEIGHT",
    "VISIBLE",
    "ACTION",
    "NEW",
    "ACTION_END_DATE",
    "CREATION_DATE",
    "UPDATED_AT",
    "PARENT_CODE",
    "ITEMGROUP_ID",
)
CATEGORY_FIELD_TAGS = (
    "CODE",
    "ID",
    "GUID",
    "NAME",
    "TITLE",
    "PARENT_CODE",
    "PARENT_ID",
    "PARENT_GUID",
    "PATH",
    "DESCRIPTION",
    "VISIBLE",
    "ACTIVE",
    "PRODUCT_COUNT",
    "PRIORITY",
    "ORDER",
)
IMAGE_TAGS = ("IMAGE", "IMGURL", "IMGURL_ALTERNATIVE")
PARAM_NAME_TAGS = ("PARAM_NAME", "NAME")
PARAM_VALUE_TAGS = ("VAL", "VALUE")
VARIANT_ITEM_TAGS = ("VARIANT",)

_CDATA_RE = re.compile(r"<!\[CDATA\[(.*?)\]\]>", re.DOTALL)
_PARAM_RE = re.compile(r"<(PARAM|PARAMETER)(?:\s[^>]*)?>(.*?)</\1\s*>", re.DOTALL | re.IGNORECASE)
_VARIANTS_RE = re.compile(r"<VARIANTS(?:\s[^>]*)?>(.*?)</VARIANTS\s*>", re.DOTALL | re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]+>")


def _element_re(tag: str) -> re.Pattern[str]:
    return re.compile(rf"<{re.escape(tag)}(?:\s[^>]*)?>(.*?)</{re.escape(tag)}\s*>", re.DOTALL)


def element_text(raw: str) -> str:
    cdata = _CDATA_RE.search(raw)
    if cdata:
        return normalize_newlines(cdata.group(1)).strip()
    return normalize_newlines(html.unescape(raw)).strip()


def find_first(block: str, tag: str) -> str | None:
    match = _element_re(tag).search(block)
    if match is None:
        return None
    return element_text(match.group(1))


def find_all(block: str, tag: str) -> list[str]:
    return [element_text(match.group(1)) for match in _element_re(tag).finditer(block)]


def find_items(text: str, item_tags: tuple[str, ...]) -> list[str]:
    for tag in item_tags:
        blocks = [match.group(1) for match in _element_re(tag).finditer(text)]
        if blocks:
            return blocks
    return []


def _first_of(block: str, tags: tuple[str, ...]) -> str:
    for tag in tags:
        value = find_first(block, tag)
        if value:
            return value
    return ""


def _param_pairs(block: str) -> list[str]:
    pairs: list[str] = []
    for match in _PARAM_RE.finditer(block):
        inner = match.group(2)
        name = _first_of(inner, PARAM_NAME_TAGS)
        value = _first_of(inner, PARAM_VALUE_TAGS)
        if name and value:
            pairs.append(f"{name}:{value}")
    return pairs


def split_variants(block: str) -> tuple[str, list[str]]:
    """Separate nested ``<VARIANTS>`` from the item that owns them."""
    variant_blocks: list[str] = []
    for match in _VARIANTS_RE.finditer(block):
        variant_blocks.extend(find_items(match.group(1), VARIANT_ITEM_TAGS))
    return _VARIANTS_RE.sub("", block), variant_blocks


def _category_fields(block: str, row: RawRow) -> None:
    categories = [value for value in find_all(block, "CATEGORY") if value]
    if not categories:
        return
    row["CATEGORY"] = categories[0]
    default = row.get("DEFAULT_CATEGORY") or categories[0]
    additional = [category for category in categories if category != default]
    if additional:
        row["ADDITIONAL_CATEGORIES"] = additional


def product_row(block: str) -> RawRow:
    params = _param_pairs(block)
    # PARAM blocks may reuse NAME/VALUE tags; keep them out of the item fields.
    item_block = _PARAM_RE.sub("", block)

    row: RawRow = {}
    for tag in PRODUCT_FIELD_TAGS:
        value = find_first(item_block, tag)
        if value:
            row[tag] = value
    _category_fields(item_block, row)

    images = [url for tag in IMAGE_TAGS for url in find_all(item_block, tag) if url and not _TAG_RE.search(url)]
    if images:
        row["IMAGE"] = images[0]
        row["IMAGE_COUNT"] = len(images)
    if params:
        row["PARAMS"] = params
    return row


def product_rows(block: str) -> list[RawRow]:
    """The item row followed by one row per nested variant."""
    item_block, variant_blocks = split_variants(block)
    parent = product_row(item_block)
    rows = [parent] if parent else []

    parent_code = parent.get("CODE") or parent.get("ITEM_ID") or ""
    for variant_block in variant_blocks:
        variant = product_row(variant_block)
        if not variant:
            continue
        if parent_code:
            variant.setdefault("PARENT_CODE", parent_code)
        if parent.get("NAME"):
            variant.setdefault("NAME", parent["NAME"])
        rows.append(variant)
    return rows


def category_row(block: str) -> RawRow:
    row: RawRow = {}
    for tag in CATEGORY_FIELD_TAGS:
        value = find_first(block, tag)
        if value:
            row[tag] = value
    return row


def parse_xml(data: bytes, *, kind: str = "products") -> list[RawRow]:
    if not data:
        return []
    text = decode_text_bytes(data)
    if kind == "categories":
        return [row for row in map(category_row, find_items(text, CATEGORY_ITEM_TAGS)) if row]
    return [row for block in find_items(text, PRODUCT_ITEM_TAGS) for row in product_rows(block)]


__all__ = [
    "CATEGORY_FIELD_TAGS",
    "CATEGORY_ITEM_TAGS",
    "PRODUCT_FIELD_TAGS",
    "PRODUCT_ITEM_TAGS",
    "VARIANT_ITEM_TAGS",
    "element_text",
    "find_items",
    "parse_xml",
    "product_rows",
    "split_variants",
]
