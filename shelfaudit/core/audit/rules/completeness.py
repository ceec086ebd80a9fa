"""Missing-field checks for standalone products and variant parents."""

from ...canonical import ProductRecord
from ...text import strip_html
from ..report import Issue, product_issue

MIN_LONG_DESCRIPTION_LENGTH = 100


def analyze_completeness(products: list[ProductRecord]) -> list[Issue]:
    issues: list[Issue] = []
    for product in products:
        # Variants inherit these fields from their parent.
        if product.is_variant:
            continue

        if not product.image and not product.image_count:
            issues.append(product_issue(product, "no_image", "error", "Product has no image."))
        elif (product.image_count or 1) == 1:
            issues.append(
                product_issue(product, "single_image", "warning", "Product has only one image (at least 3 recommended).")
            )

        if not product.short_description.strip():
            issues.append(product_issue(product, "no_short_description", "warning", "Product has no short description."))

        if not product.description.strip():
            issues.append(product_issue(product, "no_long_description", "error", "Product has no long description."))
        else:
            length = len(strip_html(product.description))
            if length < MIN_LONG_DESCRIPTION_LENGTH:
                issues.append(
                    product_issue(
                        product,
                        "short_description_too_short",
                        "warning",
                        f"Long description has only {length} characters "
                        f"({MIN_LONG_DESCRIPTION_LENGTH} recommended).",
                    )
                )

        if product.price is None:
            issues.append(product_issue(product, "no_price", "error", "Product has no price."))
        elif product.price == 0:
            issues.append(product_issue(product, "zero_price", "error", "Product price is zero."))

        if not product.ean:
            issues.append(product_issue(product, "no_ean", "warning", "Product has no EAN/GTIN."))

        if not product.manufacturer.strip() and not product.brand.strip():
            issues.append(product_issue(product, "no_manufacturer", "warning", "Product has no manufacturer or brand."))

        if not product.default_category.strip() and not product.category_text.strip():
            issues.append(product_issue(product, "no_category", "error", "Product is not assigned to any category."))

        if not product.filter_parameters:
            issues.append(product_issue(product, "no_filter_parameters", "warning", "Product has no filter parameters."))

    return issues


__all__ = ["analyze_completeness"]
