from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ..audit.report import DIMENSIONS, Issue
from .utils import dict_rows_to_csv, make_export_filename, ordered_unique

CODE_COLUMNS = ["code"]


@dataclass(frozen=True)
class CodesExport:
    csv_bytes: bytes
    filename: str
    codes: tuple[str, ...]


def _product_code(issue: Issue | Mapping[str, Any]) -> str:
    if isinstance(issue, Issue):
        return issue.subject_code if issue.subject_kind == "product" else ""
    if str(issue.get("subject_kind") or "product") != "product":
        return ""
    return str(issue.get("subject_code") or "")


def export_product_codes(
    issues: Iterable[Issue | Mapping[str, Any]],
    label: str,
    *,
    now: datetime | None = None,
) -> CodesExport:
    """One-column CSV of the distinct product codes behind ``issues``.

    Category-level issues carry no product code and are skipped.
    """
    codes = ordered_unique(_product_code(issue) for issue in issues)
    csv_text = dict_rows_to_csv([{"code": code} for code in codes], CODE_COLUMNS)
    return CodesExport(
        csv_bytes=csv_text.encode("utf-8"),
        filename=make_export_filename(label, now=now),
        codes=tuple(codes),
    )


def select_issues(
    report_payload: Mapping[str, Any],
    *,
    dimension: str | None = None,
    issue_type: str | None = None,
) -> list[dict[str, Any]]:
    """Pick issue dicts out of a serialized report."""
    issues_by_dimension = report_payload.get("issues") or {}
    if not isinstance(issues_by_dimension, Mapping):
        raise ValueError("Report payload has no issues mapping.")
    if dimension is not None and dimension not in DIMENSIONS:
        raise ValueError(f"dimension must be one of: {', '.join(DIMENSIONS)}")

    dimensions = [dimension] if dimension else list(DIMENSIONS)
    selected: list[dict[str, Any]] = []
    for name in dimensions:
        for issue in issues_by_dimension.get(name) or []:
            if issue_type and issue.get("type") != issue_type:
                continue
            selected.append(dict(issue))
    return selected


__all__ = ["CodesExport", "export_product_codes", "select_issues"]
