"""Cross-record identity checks and description markup hygiene."""

from ...canonical import ProductRecord
from ...text import check_html_errors, has_inline_styles
from ..families import family_keys
from ..report import Issue, product_issue


def _group_indexes(values: list[str]) -> dict[str, list[int]]:
    groups: dict[str, list[int]] = {}
    for index, value in enumerate(values):
        if value:
            groups.setdefault(value, []).append(index)
    return groups


def analyze_data_quality(products: list[ProductRecord]) -> list[Issue]:
    issues: list[Issue] = []

    for product in products:
        if not product.description:
            continue
        html_error = check_html_errors(product.description)
        if html_error:
            issues.append(product_issue(product, "html_errors", "warning", html_error))
        if has_inline_styles(product.description):
            issues.append(
                product_issue(
                    product, "inline_styles", "warning", 'Description uses inline styles (style="...") instead of classes.'
                )
            )

    keys = family_keys(products)
    names = _group_indexes([product.name.lower().strip() for product in products])
    for indexes in names.values():
        if len(indexes) < 2:
            continue
        for index in indexes:
            # Variants of one family legitimately share a name.
            others = tuple(products[other].code for other in indexes if keys[other] != keys[index])
            if others:
                issues.append(
                    product_issue(
                        products[index],
                        "duplicate_name",
                        "warning",
                        f"Name is shared with {len(others)} other product(s).",
                        related_products=others,
                    )
                )

    codes = _group_indexes([product.code.lower().strip() for product in products])
    for indexes in codes.values():
        if len(indexes) < 2:
            continue
        for index in indexes:
            others = tuple(products[other].code for other in indexes if other != index)
            issues.append(
                product_issue(
                    products[index],
                    "duplicate_code",
                    "error",
                    f"Product code appears {len(indexes)} times.",
                    related_products=others,
                )
            )

    eans = _group_indexes([product.ean.strip() for product in products])
    for ean, indexes in eans.items():
        if len(indexes) < 2:
            continue
        for index in indexes:
            others = tuple(products[other].code for other in indexes if other != index)
            issues.append(
                product_issue(
                    products[index],
                    "duplicate_ean",
                    "error",
                    f"EAN {ean} appears {len(indexes)} times.",
                    related_products=others,
                )
            )

    return issues


__all__ = ["analyze_data_quality"]
