"""Map loosely-typed feed rows onto canonical product/category records."""

import logging
import re
from typing import Any, Iterable

from .entities import CategoryRecord, ProductRecord, RecordKind
from .fields import (
    ADDITIONAL_IMAGES_ALIASES,
    CATEGORY_FIELDS,
    CATEGORY_PATH_DELIMITERS,
    FILTER_PARAMS_ALIASES,
    IMAGE_COUNT_ALIASES,
    MAX_NUMBERED_COLUMNS,
    NUMBERED_IMAGE_ALIASES,
    PARAMS_ALIASES,
    PARAM_NAME_ALIASES,
    PARAM_VALUE_ALIASES,
    PRODUCT_FIELDS,
    FieldSpec,
)
from .helpers import (
    clean_text,
    is_blank,
    parse_bool,
    parse_date,
    parse_int,
    parse_number,
    split_tokens,
)

RawRow = dict[str, Any]

logger = logging.getLogger(__name__)

_CATEGORY_LIST_SPLIT_RE = re.compile(r"[;\n]+")


def lookup(row: RawRow, aliases: Iterable[str]) -> Any:
    for alias in aliases:
        value = row.get(alias)
        if not is_blank(value):
            return value
    return None


def coerce(value: Any, spec: FieldSpec) -> Any:
    if value is None:
        if spec.default is not None:
            return spec.default
        if spec.coerce == "bool":
            return False
        if spec.coerce == "text":
            return ""
        if spec.coerce == "list":
            return []
        return None
    if spec.coerce == "number":
        return parse_number(value)
    if spec.coerce == "int":
        return parse_int(value)
    if spec.coerce == "bool":
        return parse_bool(value)
    if spec.coerce == "date":
        return parse_date(value)
    if spec.coerce == "list":
        if isinstance(value, (list, tuple)):
            return split_tokens(value)
        return split_tokens(_CATEGORY_LIST_SPLIT_RE.split(clean_text(value)))
    return clean_text(value)


def map_fields(row: RawRow, specs: Iterable[FieldSpec]) -> dict[str, Any]:
    return {spec.name: coerce(lookup(row, spec.aliases), spec) for spec in specs}


def count_images(row: RawRow) -> int:
    explicit = parse_int(lookup(row, IMAGE_COUNT_ALIASES))
    if explicit is not None:
        return max(explicit, 0)

    count = 0
    main_spec = next(spec for spec in PRODUCT_FIELDS if spec.name == "image")
    if lookup(row, main_spec.aliases) is not None:
        count += 1
    for index in range(2, MAX_NUMBERED_COLUMNS + 1):
        aliases = [alias.format(n=index) for alias in NUMBERED_IMAGE_ALIASES]
        if lookup(row, aliases) is not None:
            count += 1
    count += len(split_tokens(lookup(row, ADDITIONAL_IMAGES_ALIASES)))
    return count


def parse_filter_parameters(row: RawRow) -> tuple[list[str], dict[str, str]]:
    filters = split_tokens(lookup(row, FILTER_PARAMS_ALIASES))
    parameters: dict[str, str] = {}

    for index in range(1, MAX_NUMBERED_COLUMNS + 1):
        name = clean_text(lookup(row, [alias.format(n=index) for alias in PARAM_NAME_ALIASES]))
        value = clean_text(lookup(row, [alias.format(n=index) for alias in PARAM_VALUE_ALIASES]))
        if name and value:
            filters.append(f"{name}:{value}")
            parameters[name] = value

    for pair in split_tokens(lookup(row, PARAMS_ALIASES)):
        filters.append(pair)
        name, sep, value = pair.partition(":")
        if sep and name.strip() and value.strip():
            parameters[name.strip()] = value.strip()

    return filters, parameters


def product_from_row(row: RawRow) -> ProductRecord | None:
    values = map_fields(row, PRODUCT_FIELDS)
    if not values["code"]:
        return None
    filters, parameters = parse_filter_parameters(row)
    values["image_count"] = count_images(row)
    values["filter_parameters"] = filters
    values["parameters"] = parameters
    return ProductRecord(**values)


def category_name_from_path(path: str) -> str:
    for delimiter in CATEGORY_PATH_DELIMITERS:
        if delimiter in path:
            parts = [part.strip() for part in path.split(delimiter) if part.strip()]
            if parts:
                return parts[-1]
    return ""


def category_from_row(row: RawRow) -> CategoryRecord | None:
    values = map_fields(row, CATEGORY_FIELDS)
    if not values["code"] and not values["name"]:
        return None
    if not values["name"]:
        values["name"] = category_name_from_path(values["path"]) or values["path"] or values["code"]
    return CategoryRecord(**values)


def canonicalize(rows: Iterable[RawRow], kind: RecordKind) -> list[ProductRecord] | list[CategoryRecord]:
    if kind == "products":
        builder = product_from_row
    elif kind == "categories":
        builder = category_from_row
    else:
        raise ValueError("kind must be one of: products, categories")

    records = []
    dropped = 0
    for row in rows:
        record = builder(row)
        if record is None:
            dropped += 1
            continue
        records.append(record)
    if dropped:
        logger.debug("Dropped %d %s row(s) without identity.", dropped, kind)
    return records


def canonicalize_products(rows: Iterable[RawRow]) -> list[ProductRecord]:
    return canonicalize(rows, "products")  # type: ignore[return-value]


def canonicalize_categories(rows: Iterable[RawRow]) -> list[CategoryRecord]:
    return canonicalize(rows, "categories")  # type: ignore[return-value]


__all__ = [
    "RawRow",
    "canonicalize",
    "canonicalize_categories",
    "canonicalize_products",
    "category_from_row",
    "category_name_from_path",
    "count_images",
    "lookup",
    "map_fields",
    "parse_filter_parameters",
    "product_from_row",
]
