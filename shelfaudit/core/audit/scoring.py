"""Turn issue counts into 0-100 dimension scores and a weighted overall."""

import math
from collections.abc import Iterable

from .report import AuditScores, Issue, IssueSet

DUPLICATE_TYPES = frozenset({"duplicate_description", "near_duplicate"})
QUALITY_TYPES = frozenset({"lorem_ipsum", "test_content", "emoji_spam", "url_in_description"})

# Points subtracted per (error, warning).
PENALTIES: dict[str, tuple[int, int]] = {
    "completeness": (5, 2),
    "business": (10, 3),
    "data_quality": (10, 3),
    "stock": (10, 3),
    "categories": (5, 2),
    "seo": (8, 2),
}

WEIGHTS: dict[str, float] = {
    "uniqueness": 0.10,
    "quality": 0.15,
    "completeness": 0.20,
    "business": 0.15,
    "data_quality": 0.10,
    "stock": 0.10,
    "categories": 0.10,
    "seo": 0.10,
}


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> float:
    return max(0.0, min(100.0, value))


def penalty_score(issues: Iterable[Issue], per_error: int, per_warning: int) -> float:
    errors = 0
    warnings = 0
    for issue in issues:
        if issue.is_error:
            errors += 1
        else:
            warnings += 1
    return clamp_score(100 - errors * per_error - warnings * per_warning)


def raw_scores(issues: IssueSet, product_count: int) -> dict[str, float]:
    """Unrounded dimension scores. Variant issues are not scored."""
    if product_count <= 0:
        return {dimension: 100.0 for dimension in WEIGHTS}

    duplicates = sum(1 for issue in issues.content if issue.type in DUPLICATE_TYPES)
    quality_hits = sum(1 for issue in issues.content if issue.type in QUALITY_TYPES)
    scores = {
        "uniqueness": clamp_score(100 - duplicates / product_count * 100),
        "quality": clamp_score(100 - quality_hits / product_count * 200),
    }
    for dimension, (per_error, per_warning) in PENALTIES.items():
        scores[dimension] = penalty_score(getattr(issues, dimension), per_error, per_warning)
    return scores


def compute_scores(issues: IssueSet, product_count: int) -> AuditScores:
    scores = raw_scores(issues, product_count)
    overall = round_half_up(sum(scores[dimension] * weight for dimension, weight in WEIGHTS.items()))
    return AuditScores(
        **{dimension: round_half_up(value) for dimension, value in scores.items()},
        overall=max(0, min(100, overall)),
    )


__all__ = ["PENALTIES", "WEIGHTS", "compute_scores", "raw_scores", "round_half_up"]
