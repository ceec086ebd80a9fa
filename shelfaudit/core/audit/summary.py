"""Human-oriented digest of an audit report."""

from dataclasses import dataclass, field
from typing import Any, Literal

from .report import AuditReport

HealthLevel = Literal["excellent", "good", "average", "critical"]

PRIORITY_THRESHOLD = 80
MAX_PRIORITIES = 5

HEALTH_LABELS: dict[str, str] = {
    "excellent": "Excellent",
    "good": "Good",
    "average": "Average",
    "critical": "Critical",
}

# Dimension -> (label, recommended fix), in tie-break order.
RECOMMENDATIONS: dict[str, tuple[str, str]] = {
    "completeness": ("Data completeness", "Fill in missing images, descriptions, EAN codes and manufacturers."),
    "quality": ("Content quality", "Remove test content, Lorem Ipsum and URLs from product descriptions."),
    "uniqueness": ("Uniqueness", "Rewrite duplicated product descriptions."),
    "data_quality": ("Data quality", "Fix duplicate codes, duplicate EANs and broken HTML in descriptions."),
    "stock": ("Stock data", "Make availability labels consistent with stock and fix negative stock."),
    "categories": ("Category structure", "Remove empty categories and assign every product a category."),
    "business": ("Business rules", "Fix price anomalies and expired promotions."),
    "seo": ("SEO", "Fill in meta descriptions, shorten long titles and remove duplicates."),
}


@dataclass(frozen=True)
class Priority:
    dimension: str
    label: str
    score: int
    fix: str

    def to_dict(self) -> dict[str, Any]:
        return {"dimension": self.dimension, "label": self.label, "score": self.score, "fix": self.fix}


@dataclass(frozen=True)
class AuditSummary:
    total_issues: int
    error_count: int
    warning_count: int
    overall: int
    health: HealthLevel
    priorities: tuple[Priority, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_issues": self.total_issues,
            "error_count": self.error_count,
            "warning_count": self.warning_count,
            "overall": self.overall,
            "health": self.health,
            "priorities": [priority.to_dict() for priority in self.priorities],
        }


def health_level(overall: int) -> HealthLevel:
    if overall >= 90:
        return "excellent"
    if overall >= 70:
        return "good"
    if overall >= 50:
        return "average"
    return "critical"


def priorities(report: AuditReport) -> tuple[Priority, ...]:
    scores = report.scores.dimension_scores()
    entries = [
        Priority(dimension=dimension, label=label, score=scores[dimension], fix=fix)
        for dimension, (label, fix) in RECOMMENDATIONS.items()
        if scores[dimension] < PRIORITY_THRESHOLD
    ]
    entries.sort(key=lambda entry: entry.score)
    return tuple(entries[:MAX_PRIORITIES])


def summarize(report: AuditReport) -> AuditSummary:
    all_issues = list(report.issues)
    errors = sum(1 for issue in all_issues if issue.is_error)
    return AuditSummary(
        total_issues=len(all_issues),
        error_count=errors,
        warning_count=len(all_issues) - errors,
        overall=report.scores.overall,
        health=health_level(report.scores.overall),
        priorities=priorities(report),
    )


def summary_text(report: AuditReport) -> str:
    summary = summarize(report)
    scores = report.scores
    lines = [
        "PRODUCT CONTENT AUDIT",
        f"Date: {report.analyzed_at.date().isoformat()}",
        f"Products: {report.product_count}",
        "",
        f"OVERALL: {scores.overall}/100 ({HEALTH_LABELS[summary.health]})",
        "",
        "SCORES:",
    ]
    lines.extend(
        f"- {label}: {getattr(scores, dimension)}/100" for dimension, (label, _fix) in RECOMMENDATIONS.items()
    )
    lines.extend(
        [
            "",
            "ISSUES:",
            f"- Total: {summary.total_issues}",
            f"- Errors: {summary.error_count}",
            f"- Warnings: {summary.warning_count}",
        ]
    )
    if summary.priorities:
        lines.extend(["", "PRIORITIES:"])
        for position, priority in enumerate(summary.priorities, start=1):
            lines.append(f"{position}. {priority.label} ({priority.score}/100)")
            lines.append(f"   -> {priority.fix}")
    return "\n".join(lines)


__all__ = ["AuditSummary", "HealthLevel", "Priority", "health_level", "priorities", "summarize", "summary_text"]
