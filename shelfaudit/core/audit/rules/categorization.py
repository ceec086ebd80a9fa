"""How each product is placed in the category tree."""

from ...canonical import CategoryRecord, ProductRecord
from ..report import Issue, product_issue
from .categories import category_keys, normalize_path


def main_categories(product: ProductRecord) -> list[str]:
    """Top-level entries among the default and additional categories."""
    out: list[str] = []
    for entry in (product.default_category, *product.additional_categories):
        entry = entry.strip()
        if entry and ">" not in entry and "/" not in entry and entry not in out:
            out.append(entry)
    return out


def analyze_categorization(
    products: list[ProductRecord],
    categories: list[CategoryRecord] | None = None,
) -> list[Issue]:
    inactive: dict[str, CategoryRecord] = {}
    for category in categories or []:
        if not category.is_active:
            for key in category_keys(category):
                inactive.setdefault(key, category)

    issues: list[Issue] = []
    for product in products:
        if product.is_variant:
            continue

        if not product.default_category and not product.category_text:
            issues.append(product_issue(product, "no_default_category", "error", "Product has no default category."))

        if product.additional_categories:
            mains = main_categories(product)
            if len(mains) > 1:
                issues.append(
                    product_issue(
                        product,
                        "multiple_main_categories",
                        "warning",
                        f"Product sits in several top-level categories: {', '.join(mains)}.",
                        categories=tuple(mains),
                    )
                )

        if inactive and product.default_category:
            default = product.default_category.strip()
            keys = (default.lower(), normalize_path(default).lower())
            hit = next((inactive[key] for key in keys if key in inactive), None)
            if hit is not None:
                issues.append(
                    product_issue(
                        product,
                        "inactive_category",
                        "warning",
                        f"Default category {hit.name or hit.code} is not active.",
                        categories=(hit.code or hit.name,),
                    )
                )

    return issues


__all__ = ["analyze_categorization", "main_categories"]
