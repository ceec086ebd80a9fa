"""Parent/variant relationship checks."""

from collections import Counter

from ...canonical import ProductRecord
from ..report import Issue, product_issue

NAME_SEPARATORS = (" - ", " / ", " | ", " – ", "(", ",")
MIN_SIBLINGS_FOR_NAMING = 3


def group_variants(products: list[ProductRecord]) -> dict[str, list[ProductRecord]]:
    """Variants keyed by ``parent_code``, in feed order."""
    groups: dict[str, list[ProductRecord]] = {}
    for product in products:
        if product.parent_code:
            groups.setdefault(product.parent_code, []).append(product)
    return groups


def naming_inconsistency(names: list[str]) -> str | None:
    """Describe the first separator used by some but not all names."""
    if len(names) < 2:
        return None
    for separator in NAME_SEPARATORS:
        hits = sum(1 for name in names if separator in name)
        if hits == len(names):
            return None
        if hits:
            return f'only {hits}/{len(names)} names contain "{separator.strip() or separator}"'
    return None


def analyze_variants(products: list[ProductRecord]) -> list[Issue]:
    issues: list[Issue] = []
    by_code = {product.code: product for product in products}

    for parent_code, variants in group_variants(products).items():
        parent = by_code.get(parent_code)
        if parent is None:
            issues.extend(
                product_issue(
                    variant, "orphan_variant", "error", f"Variant points to a missing parent product {parent_code}."
                )
                for variant in variants
            )
            continue

        name_counts = Counter(variant.name.lower().strip() for variant in variants)
        for variant in variants:
            if name_counts[variant.name.lower().strip()] > 1:
                issues.append(
                    product_issue(
                        variant, "variant_identical_names", "warning", "Variant shares its name with a sibling variant."
                    )
                )

        for variant in variants:
            if not variant.parameters and not variant.filter_parameters:
                issues.append(
                    product_issue(
                        variant, "variant_no_diff_params", "warning", "Variant has no distinguishing parameters."
                    )
                )

        for variant in variants:
            if not variant.image and not variant.image_count:
                issues.append(product_issue(variant, "variant_no_image", "warning", "Variant has no image of its own."))

        if len(variants) >= MIN_SIBLINGS_FOR_NAMING:
            problem = naming_inconsistency([variant.name for variant in variants])
            if problem:
                issues.append(
                    product_issue(
                        parent,
                        "variant_inconsistent_naming",
                        "warning",
                        f"Variant names follow different patterns ({problem}).",
                        related_products=tuple(variant.code for variant in variants),
                    )
                )

    return issues


__all__ = ["NAME_SEPARATORS", "analyze_variants", "group_variants", "naming_inconsistency"]
