"""Per-product description checks."""

from ...canonical import ProductRecord
from ...text import (
    UNKNOWN_LANGUAGE,
    describe_excessive_html,
    detect_language,
    has_emoji_spam,
    has_lorem_ipsum,
    has_test_content,
    has_urls,
    similarity,
    strip_html,
)
from ..report import Issue, product_issue

SAME_TEXT_SIMILARITY = 0.9
MIN_LANGUAGE_SAMPLE = 50


def analyze_content(
    products: list[ProductRecord],
    *,
    expected_language: str = "cs",
    min_description_length: int = 100,
) -> list[Issue]:
    issues: list[Issue] = []
    for product in products:
        description = product.description or ""
        short_description = product.short_description or ""
        stripped = strip_html(description)
        stripped_short = strip_html(short_description)

        if not stripped and not stripped_short:
            issues.append(product_issue(product, "no_description", "error", "Product has no description."))
            continue

        if stripped and len(stripped) < min_description_length:
            issues.append(
                product_issue(
                    product,
                    "too_short",
                    "warning",
                    f"Description has only {len(stripped)} characters (minimum {min_description_length}).",
                )
            )

        if stripped and stripped_short and similarity(stripped, stripped_short) > SAME_TEXT_SIMILARITY:
            issues.append(
                product_issue(product, "same_short_long", "warning", "Short and long descriptions are nearly identical.")
            )

        if has_lorem_ipsum(description) or has_lorem_ipsum(short_description):
            issues.append(product_issue(product, "lorem_ipsum", "error", "Description contains Lorem Ipsum filler."))

        if has_test_content(description) or has_test_content(short_description):
            issues.append(product_issue(product, "test_content", "error", "Description contains placeholder or test text."))

        sample = stripped if len(stripped) > len(stripped_short) else stripped_short
        if len(sample) > MIN_LANGUAGE_SAMPLE:
            detected = detect_language(sample)
            if detected not in (UNKNOWN_LANGUAGE, expected_language):
                issues.append(
                    product_issue(
                        product,
                        "wrong_language",
                        "warning",
                        f"Description looks like '{detected}', expected '{expected_language}'.",
                    )
                )

        html_problem = describe_excessive_html(description)
        if html_problem:
            issues.append(product_issue(product, "html_in_description", "warning", html_problem))

        if has_urls(stripped):
            issues.append(product_issue(product, "url_in_description", "warning", "Description contains URLs."))

        if has_emoji_spam(description) or has_emoji_spam(short_description):
            issues.append(product_issue(product, "emoji_spam", "warning", "Description contains too many emoji."))

    return issues


__all__ = ["analyze_content"]
