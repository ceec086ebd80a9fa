"""Run every analyzer over a catalog and assemble the report."""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

from ..canonical import CategoryRecord, ProductRecord, naive_utc, utcnow
from ..config import AuditConfig
from ..text import strip_html
from .duplicates import find_duplicates
from .report import AuditReport, AuditStats, DuplicateGroup, Issue, IssueSet
from .rules import (
    analyze_business,
    analyze_categories,
    analyze_categorization,
    analyze_completeness,
    analyze_content,
    analyze_data_quality,
    analyze_seo,
    analyze_stock,
    analyze_variants,
)
from .scoring import compute_scores, round_half_up

logger = logging.getLogger(__name__)


class _Isolated:
    """Collects analyzer failures so one broken check cannot sink the report."""

    def __init__(self) -> None:
        self.errors: list[dict[str, str]] = []

    def run(self, name: str, func: Callable[..., Any], *args: Any, default: Any = (), **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except Exception as exc:
            logger.exception("Analyzer %s failed.", name)
            self.errors.append({"analyzer": name, "detail": f"{type(exc).__name__}: {exc}"})
            return default


def collect_stats(products: list[ProductRecord]) -> AuditStats:
    with_description = 0
    with_short = 0
    description_chars = 0
    short_chars = 0
    with_images = 0
    image_total = 0
    categories: set[str] = set()
    parents = {product.parent_code for product in products if product.parent_code}

    for product in products:
        description = strip_html(product.description)
        if description:
            with_description += 1
            description_chars += len(description)
        short = strip_html(product.short_description)
        if short:
            with_short += 1
            short_chars += len(short)
        if product.image or product.image_count > 0:
            with_images += 1
            image_total += product.image_count or 1
        if product.category:
            categories.add(product.category)

    return AuditStats(
        with_description=with_description,
        with_short_description=with_short,
        avg_description_length=round_half_up(description_chars / with_description) if with_description else 0,
        avg_short_description_length=round_half_up(short_chars / with_short) if with_short else 0,
        with_price=sum(1 for product in products if product.price is not None and product.price > 0),
        with_stock=sum(1 for product in products if product.stock is not None and product.stock > 0),
        in_action=sum(1 for product in products if product.is_action),
        with_images=with_images,
        avg_image_count=round(image_total / with_images, 1) if with_images else 0.0,
        with_ean=sum(1 for product in products if product.ean),
        with_manufacturer=sum(1 for product in products if product.manufacturer or product.brand),
        with_category=sum(1 for product in products if product.category),
        with_variants=sum(1 for product in products if not product.parent_code and product.code in parents),
        total_variants=sum(1 for product in products if product.parent_code),
        total_categories=len(categories),
    )


def run_audit(
    products: list[ProductRecord],
    config: AuditConfig,
    categories: list[CategoryRecord] | None = None,
    *,
    now: datetime | None = None,
) -> AuditReport:
    now = naive_utc(now) if now is not None else utcnow()
    products = list(products)
    isolated = _Isolated()

    content: list[Issue] = isolated.run(
        "content",
        analyze_content,
        products,
        expected_language=config.expected_language,
        min_description_length=config.min_description_length,
        default=[],
    )
    groups: list[DuplicateGroup]
    duplicate_issues: list[Issue]
    groups, duplicate_issues = isolated.run(
        "duplicates",
        find_duplicates,
        products,
        limit=config.near_duplicate_limit,
        threshold=config.near_duplicate_threshold,
        default=([], []),
    )
    structure = isolated.run("categories", analyze_categories, products, categories, default=[])
    placement = isolated.run("categorization", analyze_categorization, products, categories, default=[])

    issues = IssueSet(
        content=tuple(content) + tuple(duplicate_issues),
        completeness=tuple(isolated.run("completeness", analyze_completeness, products)),
        data_quality=tuple(isolated.run("data_quality", analyze_data_quality, products)),
        variants=tuple(isolated.run("variants", analyze_variants, products)),
        stock=tuple(isolated.run("stock", analyze_stock, products, now=now)),
        categories=tuple(structure) + tuple(placement),
        business=tuple(isolated.run("business", analyze_business, products, now=now)),
        seo=tuple(isolated.run("seo", analyze_seo, products)),
    )
    stats = isolated.run("stats", collect_stats, products, default=AuditStats())
    scores = compute_scores(issues, len(products))

    logger.debug(
        "Audited %d product(s): %d issue(s), %d duplicate group(s), overall score %d.",
        len(products),
        len(issues),
        len(groups),
        scores.overall,
    )
    return AuditReport(
        product_count=len(products),
        analyzed_at=now,
        issues=issues,
        duplicate_groups=tuple(groups),
        stats=stats,
        scores=scores,
        errors=tuple(isolated.errors),
    )


__all__ = ["collect_stats", "run_audit"]
