"""Exact and near-duplicate description detection."""

import logging
from dataclasses import dataclass, field

from ..canonical import ProductRecord
from ..config import DEFAULT_NEAR_DUPLICATE_LIMIT, DEFAULT_NEAR_DUPLICATE_THRESHOLD
from ..text import similarity, strip_html
from .report import DuplicateGroup, Issue, product_issue

logger = logging.getLogger(__name__)

MIN_DUPLICATE_TEXT_LENGTH = 50
EXCERPT_LENGTH = 200


@dataclass
class _NearGroup:
    similarity: int
    text: str
    products: list[str] = field(default_factory=list)


def excerpt(text: str) -> str:
    if len(text) > EXCERPT_LENGTH:
        return text[:EXCERPT_LENGTH] + "..."
    return text


def _normalized_description(product: ProductRecord) -> str:
    return strip_html(product.description).lower().strip()


def find_duplicates(
    products: list[ProductRecord],
    *,
    limit: int = DEFAULT_NEAR_DUPLICATE_LIMIT,
    threshold: float = DEFAULT_NEAR_DUPLICATE_THRESHOLD,
) -> tuple[list[DuplicateGroup], list[Issue]]:
    """Group records whose long descriptions repeat.

    Identical normalized texts form ``exact`` groups. Texts that stay unique
    are compared pairwise (first ``limit`` of them only) and pairs with a word
    overlap strictly above ``threshold`` form ``near`` groups.
    """
    by_text: dict[str, list[ProductRecord]] = {}
    for product in products:
        normalized = _normalized_description(product)
        if len(normalized) > MIN_DUPLICATE_TEXT_LENGTH:
            by_text.setdefault(normalized, []).append(product)

    groups: list[DuplicateGroup] = []
    issues: list[Issue] = []

    for text, members in by_text.items():
        if len(members) < 2:
            continue
        groups.append(
            DuplicateGroup(
                type="exact",
                similarity=100,
                products=tuple(member.code for member in members),
                text=excerpt(text),
            )
        )
        for index, member in enumerate(members):
            others = tuple(other.code for pos, other in enumerate(members) if pos != index)
            issues.append(
                product_issue(
                    member,
                    "duplicate_description",
                    "warning",
                    f"Description is identical to {len(others)} other product(s).",
                    related_products=others,
                )
            )

    unique = [(text, members[0]) for text, members in by_text.items() if len(members) == 1]
    if len(unique) > limit:
        logger.debug("Near-duplicate scan capped at %d of %d unique descriptions.", limit, len(unique))
        unique = unique[:limit]

    near_groups: list[_NearGroup] = []
    for i, (text_a, product_a) in enumerate(unique):
        for text_b, product_b in unique[i + 1 :]:
            score = similarity(text_a, text_b)
            if score <= threshold:
                continue
            percent = round(score * 100)
            group = next(
                (
                    candidate
                    for candidate in near_groups
                    if product_a.code in candidate.products or product_b.code in candidate.products
                ),
                None,
            )
            if group is None:
                near_groups.append(
                    _NearGroup(similarity=percent, text=excerpt(text_a), products=[product_a.code, product_b.code])
                )
            else:
                for code in (product_a.code, product_b.code):
                    if code not in group.products:
                        group.products.append(code)
            issues.append(
                product_issue(
                    product_a,
                    "near_duplicate",
                    "warning",
                    f"{percent}% similar to product {product_b.code}.",
                    related_products=(product_b.code,),
                )
            )

    groups.extend(
        DuplicateGroup(type="near", similarity=group.similarity, products=tuple(group.products), text=group.text)
        for group in near_groups
    )
    return groups, issues


__all__ = ["DEFAULT_NEAR_DUPLICATE_LIMIT", "DEFAULT_NEAR_DUPLICATE_THRESHOLD", "excerpt", "find_duplicates"]
