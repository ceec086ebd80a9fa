from .entities import CategoryRecord, ProductRecord, RecordKind
from .fields import CATEGORY_FIELDS, PRODUCT_FIELDS, FieldSpec
from .helpers import (
    clean_text,
    days_between,
    format_number,
    is_blank,
    naive_utc,
    parse_bool,
    parse_date,
    parse_int,
    parse_number,
    split_tokens,
    utcnow,
)
from .mapping import (
    RawRow,
    canonicalize,
    canonicalize_categories,
    canonicalize_products,
    category_name_from_path,
    lookup,
)

__all__ = [
    "CATEGORY_FIELDS",
    "CategoryRecord",
    "FieldSpec",
    "PRODUCT_FIELDS",
    "ProductRecord",
    "RawRow",
    "RecordKind",
    "canonicalize",
    "canonicalize_categories",
    "canonicalize_products",
    "category_name_from_path",
    "clean_text",
    "days_between",
    "format_number",
    "is_blank",
    "lookup",
    "naive_utc",
    "parse_bool",
    "parse_date",
    "parse_int",
    "parse_number",
    "split_tokens",
    "utcnow",
]
