from typing import Any

from ...config import LOG_VERBOSITIES, get_settings
from ...core.audit.report import AuditReport

_DEFAULT_DETAIL_LIMITS = {
    "low": 80,
    "medium": 160,
    "high": 240,
}
_SAMPLE_ISSUES = 5


def _truncate_text(value: str | None, *, limit: int) -> str:
    text = str(value or "").strip()
    if len(text) <= limit:
        return text
    return f"{text[:limit].rstrip()}... [truncated]"


def _normalize_verbosity(verbosity: str) -> str:
    normalized = str(verbosity or "").strip().lower()
    if normalized in LOG_VERBOSITIES:
        return normalized
    return "medium"


def _issue_counts(report: AuditReport) -> dict[str, int]:
    return {dimension: len(issues) for dimension, issues in report.issues.by_dimension().items()}


def _sample_issues(report: AuditReport, *, limit: int) -> dict[str, list[dict[str, Any]]]:
    samples: dict[str, list[dict[str, Any]]] = {}
    for dimension, issues in report.issues.by_dimension().items():
        if not issues:
            continue
        rows = []
        for issue in issues[:_SAMPLE_ISSUES]:
            row = issue.to_dict()
            row["details"] = _truncate_text(row.get("details"), limit=limit)
            rows.append(row)
        samples[dimension] = rows
    return samples


def report_to_loggable(
    report: AuditReport,
    *,
    verbosity: str | None = None,
    debug_enabled: bool | None = None,
) -> dict[str, Any] | None:
    settings = get_settings()
    if debug_enabled is None:
        debug_enabled = settings.debug

    if not debug_enabled:
        return None

    resolved_verbosity = verbosity if verbosity is not None else settings.log_verbosity
    level = _normalize_verbosity(resolved_verbosity)
    if level == "extrahigh":
        return report.to_dict()

    if level == "low":
        return {
            "product_count": report.product_count,
            "overall": report.scores.overall,
            "issues": len(report.issues),
            "errors": len(report.errors),
        }

    summary: dict[str, Any] = {
        "product_count": report.product_count,
        "analyzed_at": report.analyzed_at.isoformat(),
        "scores": report.scores.to_dict(),
        "issue_counts": _issue_counts(report),
        "duplicate_groups": len(report.duplicate_groups),
        "errors": [dict(error) for error in report.errors],
    }

    summary["issues"] = _sample_issues(report, limit=_DEFAULT_DETAIL_LIMITS[level])
    if level == "high":
        summary["stats"] = report.stats.to_dict()
    return summary


__all__ = ["report_to_loggable"]
