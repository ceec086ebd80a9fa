"""Variant family grouping used by the cross-record checks."""

import re
from collections.abc import Iterable

from ..canonical import ProductRecord

_CODE_PREFIX_RE = re.compile(r"^([^/\-_]+)[/\-_]")


def parent_codes(products: Iterable[ProductRecord]) -> frozenset[str]:
    return frozenset(product.parent_code.lower() for product in products if product.parent_code)


def family_key(product: ProductRecord, parents: frozenset[str] = frozenset()) -> str:
    """Key shared by a parent and its variants.

    Variants use their ``parent_code``; a record other records point at uses
    its own code; anything else falls back to the code prefix before the
    first ``/``, ``-`` or ``_``.
    """
    if product.parent_code:
        return product.parent_code.lower()
    code = product.code.lower()
    if code in parents:
        return code
    match = _CODE_PREFIX_RE.match(code)
    if match:
        return match.group(1)
    return code


def family_keys(products: list[ProductRecord]) -> list[str]:
    parents = parent_codes(products)
    return [family_key(product, parents) for product in products]


def spans_families(keys: Iterable[str]) -> bool:
    return len(set(keys)) > 1


__all__ = ["family_key", "family_keys", "parent_codes", "spans_families"]
