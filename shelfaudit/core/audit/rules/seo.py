"""Search snippet checks: meta description and page title."""

from ...canonical import ProductRecord
from ...text import normalize_text, similarity, strip_html
from ..families import family_keys
from ..report import Issue, product_issue

META_MIN_LENGTH = 70
META_MAX_LENGTH = 160
TITLE_MIN_LENGTH = 10
TITLE_MAX_LENGTH = 70
META_TITLE_SIMILARITY = 0.8


def page_title(product: ProductRecord) -> str:
    return (product.meta_title or product.name).strip()


def _meta_issues(product: ProductRecord) -> list[Issue]:
    meta = strip_html(product.meta_description)
    if not meta:
        return [product_issue(product, "no_meta_description", "warning", "Product has no meta description.")]

    issues: list[Issue] = []
    if len(meta) < META_MIN_LENGTH:
        issues.append(
            product_issue(
                product,
                "meta_too_short",
                "warning",
                f"Meta description has {len(meta)} characters (at least {META_MIN_LENGTH} recommended).",
            )
        )
    elif len(meta) > META_MAX_LENGTH:
        issues.append(
            product_issue(
                product,
                "meta_too_long",
                "warning",
                f"Meta description has {len(meta)} characters (at most {META_MAX_LENGTH} shown in results).",
            )
        )

    normalized = normalize_text(meta)
    titles = {normalize_text(product.name), normalize_text(product.meta_title)} - {""}
    if normalized in titles:
        issues.append(product_issue(product, "meta_same_as_title", "error", "Meta description repeats the title."))
    elif similarity(meta, page_title(product)) > META_TITLE_SIMILARITY:
        issues.append(
            product_issue(product, "meta_contains_title", "warning", "Meta description mostly restates the title.")
        )

    short_description = strip_html(product.short_description)
    if short_description and (
        normalized == normalize_text(short_description)
        or similarity(meta, short_description) > META_TITLE_SIMILARITY
    ):
        issues.append(
            product_issue(product, "meta_same_as_short_desc", "warning", "Meta description copies the short description.")
        )
    return issues


def _title_issues(product: ProductRecord) -> list[Issue]:
    title = page_title(product)
    if not title:
        return []
    if len(title) < TITLE_MIN_LENGTH:
        return [
            product_issue(
                product,
                "title_too_short",
                "warning",
                f"Title has {len(title)} characters (at least {TITLE_MIN_LENGTH} recommended).",
            )
        ]
    if len(title) > TITLE_MAX_LENGTH:
        return [
            product_issue(
                product,
                "title_too_long",
                "warning",
                f"Title has {len(title)} characters (at most {TITLE_MAX_LENGTH} shown in results).",
            )
        ]
    return []


def _duplicate_meta_issues(products: list[ProductRecord]) -> list[Issue]:
    keys = family_keys(products)
    by_meta: dict[str, list[int]] = {}
    for index, product in enumerate(products):
        if product.is_variant:
            continue
        normalized = normalize_text(strip_html(product.meta_description))
        if normalized:
            by_meta.setdefault(normalized, []).append(index)

    issues: list[Issue] = []
    for indexes in by_meta.values():
        if len(indexes) < 2:
            continue
        for index in indexes:
            others = tuple(products[other].code for other in indexes if keys[other] != keys[index])
            if others:
                issues.append(
                    product_issue(
                        products[index],
                        "duplicate_meta_description",
                        "error",
                        f"Meta description is shared with {len(others)} other product(s).",
                        related_products=others,
                    )
                )
    return issues


def analyze_seo(products: list[ProductRecord]) -> list[Issue]:
    issues: list[Issue] = []
    for product in products:
        if product.is_variant:
            continue
        issues.extend(_meta_issues(product))
        issues.extend(_title_issues(product))
    issues.extend(_duplicate_meta_issues(products))
    return issues


__all__ = ["analyze_seo", "page_title"]
