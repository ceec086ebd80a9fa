"""Availability label and stock quantity checks."""

from datetime import datetime

from ...canonical import ProductRecord, days_between, format_number
from ..report import Issue, product_issue
from .variants import group_variants

IN_STOCK_MARKERS = ("skladem", "stock", "ihned", "dostupn", "k dispozici")
OUT_OF_STOCK_MARKERS = ("vyprodán", "sold out", "out of stock", "nedostupn", "není skladem", "na objednávku")
LONG_SOLD_OUT_DAYS = 30


def is_out_of_stock_text(text: str | None) -> bool:
    lowered = (text or "").lower()
    return any(marker in lowered for marker in OUT_OF_STOCK_MARKERS)


def is_in_stock_text(text: str | None) -> bool:
    """True for labels such as "Skladem" or "In stock"; "Out of stock" is not one."""
    lowered = (text or "").lower()
    if is_out_of_stock_text(lowered):
        return False
    return any(marker in lowered for marker in IN_STOCK_MARKERS)


def stock_status(product: ProductRecord) -> str:
    availability = (product.availability or "").lower()
    if "skladem" in availability and not is_out_of_stock_text(availability):
        return "in_stock"
    if product.stock is not None and product.stock > 0:
        return "in_stock"
    if "vyprodán" in availability or (product.stock is not None and product.stock <= 0):
        return "sold_out"
    return "unknown"


def analyze_stock(products: list[ProductRecord], *, now: datetime) -> list[Issue]:
    issues: list[Issue] = []
    for product in products:
        has_stock = product.stock is not None and product.stock > 0
        no_stock = product.stock is not None and product.stock <= 0

        if not product.availability_in_stock.strip():
            issues.append(
                product_issue(product, "no_availability_in_stock", "warning", "No availability label set for the in-stock state.")
            )
        elif not is_in_stock_text(product.availability_in_stock):
            issues.append(
                product_issue(
                    product,
                    "wrong_availability_in_stock",
                    "warning",
                    f'In-stock availability label does not read as available: "{product.availability_in_stock}".',
                )
            )

        if not product.availability_out_of_stock.strip():
            issues.append(
                product_issue(
                    product, "no_availability_out_of_stock", "warning", "No availability label set for the sold-out state."
                )
            )
        elif not is_out_of_stock_text(product.availability_out_of_stock):
            issues.append(
                product_issue(
                    product,
                    "wrong_availability_out_of_stock",
                    "warning",
                    f'Sold-out availability label does not read as unavailable: "{product.availability_out_of_stock}".',
                )
            )

        if has_stock and product.availability and product.availability_in_stock:
            if product.availability != product.availability_in_stock and not is_in_stock_text(product.availability):
                issues.append(
                    product_issue(
                        product,
                        "in_stock_zero_quantity",
                        "error",
                        f'Stock is {format_number(product.stock)} but availability is "{product.availability}" '
                        f'instead of "{product.availability_in_stock}".',
                    )
                )
        if no_stock and product.availability and product.availability_out_of_stock:
            if product.availability != product.availability_out_of_stock and not is_out_of_stock_text(product.availability):
                issues.append(
                    product_issue(
                        product,
                        "in_stock_zero_quantity",
                        "error",
                        f'Stock is {format_number(product.stock)} but availability is "{product.availability}" '
                        f'instead of "{product.availability_out_of_stock}".',
                    )
                )

        if product.stock is not None and product.stock < 0:
            issues.append(
                product_issue(product, "negative_stock", "error", f"Stock is negative: {format_number(product.stock)}.")
            )

        if no_stock and product.updated_at is not None:
            days = days_between(product.updated_at, now)
            if days > LONG_SOLD_OUT_DAYS:
                issues.append(
                    product_issue(product, "long_sold_out", "warning", f"Sold out for more than {round(days)} days.")
                )

    by_code = {product.code: product for product in products}
    for parent_code, variants in group_variants(products).items():
        statuses = {status for status in map(stock_status, variants) if status != "unknown"}
        if len(statuses) > 1:
            parent = by_code.get(parent_code)
            issues.append(
                Issue(
                    type="variant_stock_inconsistent",
                    severity="warning",
                    details="Variants disagree on stock status.",
                    subject_code=parent_code,
                    subject_name=parent.name if parent else "",
                    related_products=tuple(variant.code for variant in variants),
                )
            )

    return issues


__all__ = [
    "IN_STOCK_MARKERS",
    "OUT_OF_STOCK_MARKERS",
    "analyze_stock",
    "is_in_stock_text",
    "is_out_of_stock_text",
    "stock_status",
]
