"""Feed upload and audit helpers for the API routes."""

import json
import logging

from fastapi import HTTPException, UploadFile

from ...config import get_settings
from ...core.api import FeedResult, analyze, import_feed
from ...core.audit.report import AuditReport
from ...core.canonical import RecordKind
from ..logging import report_to_loggable

logger = logging.getLogger("uvicorn.error")


def read_upload(file: UploadFile) -> bytes:
    """Read an upload, refusing anything above ``MAX_UPLOAD_BYTES``."""
    limit = get_settings().max_upload_bytes
    data = file.file.read(limit + 1)
    if len(data) > limit:
        raise HTTPException(
            status_code=413,
            detail=f"{file.filename or 'Upload'} exceeds the {limit} byte upload limit.",
        )
    return data


def log_report_summary(report: AuditReport) -> None:
    payload = report_to_loggable(report)
    if payload is None:
        return
    logger.debug("Audit report summary:\n%s", json.dumps(payload, ensure_ascii=False, indent=2))


def run_import_feed(file: UploadFile, *, kind: RecordKind) -> FeedResult:
    data = read_upload(file)
    file_name = file.filename or ""
    try:
        result = import_feed(data, file_name, kind=kind)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except Exception as exc:
        raise HTTPException(status_code=500, detail=f"Internal feed import error: {exc}") from exc
    logger.debug("Imported %d %s record(s) from %r.", len(result.records), kind, file_name)
    return result


def run_audit(
    products_file: UploadFile,
    categories_file: UploadFile | None,
    *,
    language: str,
    min_length: int,
) -> tuple[AuditReport, list[dict[str, str]]]:
    products = run_import_feed(products_file, kind="products")
    if products.errors:
        raise HTTPException(status_code=422, detail=products.errors[0]["detail"])

    feed_errors: list[dict[str, str]] = []
    categories = None
    if categories_file is not None and categories_file.filename:
        category_result = run_import_feed(categories_file, kind="categories")
        feed_errors.extend(category_result.errors)
        categories = category_result.records or None

    try:
        report = analyze(
            products.records,  # type: ignore[arg-type]
            language,
            min_length,
            categories,  # type: ignore[arg-type]
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    log_report_summary(report)
    return report, feed_errors


__all__ = ["log_report_summary", "read_upload", "run_audit", "run_import_feed"]
