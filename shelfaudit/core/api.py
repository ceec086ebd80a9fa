"""Stable public API facade for the ShelfAudit core engine."""


from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, Mapping

from .audit.engine import run_audit
from .audit.report import AuditReport, Issue
from .audit.summary import AuditSummary, summarize, summary_text
from .canonical import CategoryRecord, ProductRecord, RecordKind, canonicalize
from .config import AuditConfig, config_from_env, validate_language
from .detect import detect_format
from .exporters.codes import CodesExport
from .exporters.codes import export_product_codes as _export_product_codes
from .importers import parse_category_feed, parse_product_feed, parse_rows

_KINDS = ("products", "categories")


@dataclass
class FeedResult:
    kind: str
    format: str
    records: list[ProductRecord] | list[CategoryRecord] = field(default_factory=list)
    errors: list[dict[str, str]] = field(default_factory=list)


def import_feed(
    data: bytes | str | Path,
    file_name: str | None = None,
    *,
    kind: RecordKind = "products",
) -> FeedResult:
    """Parse a feed into records, reporting an empty result as an error entry.

    Unsupported extensions and undecodable containers still raise.
    """
    if kind not in _KINDS:
        raise ValueError(f"kind must be one of: {', '.join(_KINDS)}")
    feed_bytes, resolved_name = _coerce_input(data, file_name)
    feed_format = detect_format(resolved_name)
    records = canonicalize(parse_rows(feed_bytes, resolved_name, kind=kind), kind)
    errors: list[dict[str, str]] = []
    if not records:
        errors.append(
            {
                "file": resolved_name,
                "detail": f"No {kind} found in {resolved_name}. Check the header row and the identifier column.",
            }
        )
    return FeedResult(kind=kind, format=feed_format, records=records, errors=errors)  # type: ignore[arg-type]


def analyze(
    products: Iterable[ProductRecord],
    expected_language: str | None = None,
    min_description_length: int | None = None,
    categories: Iterable[CategoryRecord] | None = None,
    *,
    config: AuditConfig | None = None,
    now: datetime | None = None,
) -> AuditReport:
    """Audit a product catalog.

    ``expected_language`` defaults to ``cs`` and ``min_description_length``
    to 100. Explicit arguments win over ``config``; ``now`` pins the
    reference time of the age-based checks.
    """
    base = config or AuditConfig()
    if expected_language is not None:
        validate_language(expected_language)
    resolved = AuditConfig(
        expected_language=expected_language if expected_language is not None else base.expected_language,
        min_description_length=(
            min_description_length if min_description_length is not None else base.min_description_length
        ),
        near_duplicate_limit=base.near_duplicate_limit,
        near_duplicate_threshold=base.near_duplicate_threshold,
    )
    category_list = list(categories) if categories is not None else None
    return run_audit(list(products), resolved, category_list, now=now)


def export_product_codes(
    issues: Iterable[Issue | Mapping[str, Any]],
    label: str,
    *,
    now: datetime | None = None,
) -> CodesExport:
    return _export_product_codes(issues, label, now=now)


def _coerce_input(value: bytes | str | Path, file_name: str | None) -> tuple[bytes, str]:
    if isinstance(value, bytes):
        if not file_name:
            raise ValueError("file_name is required when passing raw bytes.")
        return value, file_name
    path = Path(value)
    return path.read_bytes(), file_name or path.name


__all__ = [
    "AuditConfig",
    "AuditReport",
    "AuditSummary",
    "CodesExport",
    "FeedResult",
    "analyze",
    "config_from_env",
    "detect_format",
    "export_product_codes",
    "import_feed",
    "parse_category_feed",
    "parse_product_feed",
    "summarize",
    "summary_text",
]
