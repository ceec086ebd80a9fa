"""Pricing, availability and promotion sanity checks.

All age checks are measured against the ``now`` passed in by the caller.
"""

from datetime import datetime

from ...canonical import ProductRecord, days_between, format_number
from ..report import Issue, product_issue
from .stock import is_in_stock_text, is_out_of_stock_text

SUSPICIOUS_DISCOUNT_PERCENT = 50
ROUND_PRICE_STEP = 1000
MAX_IN_STOCK_DELIVERY_DAYS = 3
INQUIRY_MARKERS = ("dotaz", "inquiry", "na objednávku")
LONG_INQUIRY_DAYS = 90
NEW_FLAG_MAX_DAYS = 90
PERMANENT_ACTION_DAYS = 30


def _price_issues(product: ProductRecord) -> list[Issue]:
    issues: list[Issue] = []
    price = product.price
    before = product.price_before_discount

    if price is not None:
        if price == 0:
            issues.append(product_issue(product, "zero_price", "error", "Price is zero.", group="price"))
        elif price < 0:
            issues.append(
                product_issue(product, "negative_price", "error", f"Price is negative: {format_number(price)}.", group="price")
            )

    if price is not None and before is not None:
        if price > before:
            issues.append(
                product_issue(
                    product,
                    "discount_higher_than_price",
                    "error",
                    f"Price {format_number(price)} is higher than the price before discount {format_number(before)}.",
                    group="price",
                )
            )
        if before > 0:
            discount = (before - price) / before * 100
            if discount > SUSPICIOUS_DISCOUNT_PERCENT:
                issues.append(
                    product_issue(
                        product,
                        "suspicious_discount",
                        "warning",
                        f"Discount of {round(discount)}% looks like a data error or a fake sale.",
                        group="price",
                    )
                )

    # Heuristic: prices typed by hand tend to be exact thousands.
    if price is not None and price >= ROUND_PRICE_STEP and price % ROUND_PRICE_STEP == 0:
        issues.append(
            product_issue(
                product,
                "suspicious_round_price",
                "warning",
                f"Price {format_number(price)} is suspiciously round.",
                group="price",
            )
        )
    return issues


def _availability_issues(product: ProductRecord, now: datetime) -> list[Issue]:
    issues: list[Issue] = []
    availability = product.availability.lower()
    in_stock = is_in_stock_text(availability) or (
        product.stock is not None and product.stock > 0 and not is_out_of_stock_text(availability)
    )
    if in_stock and product.delivery_days is not None and product.delivery_days > MAX_IN_STOCK_DELIVERY_DAYS:
        issues.append(
            product_issue(
                product,
                "stock_delivery_conflict",
                "warning",
                f"Product is in stock but delivery takes {format_number(product.delivery_days)} days.",
                group="availability",
            )
        )

    on_inquiry = any(marker in availability for marker in INQUIRY_MARKERS)
    if on_inquiry and product.created_at is not None:
        age = days_between(product.created_at, now)
        if age > LONG_INQUIRY_DAYS:
            issues.append(
                product_issue(
                    product,
                    "long_inquiry_product",
                    "warning",
                    f"Product has been available on inquiry only for {round(age)} days.",
                    group="availability",
                )
            )
    return issues


def _promo_issues(product: ProductRecord, now: datetime) -> list[Issue]:
    issues: list[Issue] = []
    end = product.action_end_date

    if product.is_action and end is not None and end < now:
        issues.append(
            product_issue(product, "expired_action", "error", f"Promotion ended on {end.date().isoformat()}.", group="promo")
        )

    if product.is_new and product.created_at is not None:
        age = days_between(product.created_at, now)
        if age > NEW_FLAG_MAX_DAYS:
            issues.append(
                product_issue(
                    product,
                    "old_product_new_flag",
                    "warning",
                    f'Product is flagged as new but is {round(age)} days old.',
                    group="promo",
                )
            )

    if product.is_action:
        if end is None:
            issues.append(
                product_issue(product, "permanent_action", "warning", "Promotion has no end date.", group="promo")
            )
        elif days_between(now, end) > PERMANENT_ACTION_DAYS and product.created_at is not None:
            if days_between(product.created_at, now) > PERMANENT_ACTION_DAYS:
                issues.append(
                    product_issue(
                        product,
                        "permanent_action",
                        "warning",
                        f"Promotion runs for more than {PERMANENT_ACTION_DAYS} more days on an established product.",
                        group="promo",
                    )
                )
    return issues


def analyze_business(products: list[ProductRecord], *, now: datetime) -> list[Issue]:
    issues: list[Issue] = []
    for product in products:
        issues.extend(_price_issues(product))
        issues.extend(_availability_issues(product, now))
        issues.extend(_promo_issues(product, now))
    return issues


__all__ = ["INQUIRY_MARKERS", "analyze_business"]
