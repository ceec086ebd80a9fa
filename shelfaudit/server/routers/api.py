"""JSON API routes: /health, /api/v1/*."""


from typing import Literal

from fastapi import APIRouter, File, Form, HTTPException, UploadFile
from fastapi.responses import Response

from ...config import get_settings
from ...core.api import detect_format, export_product_codes, summarize
from ..helpers.auditing import run_audit, run_import_feed
from ..schemas import ExportCodesRequest

settings = get_settings()
router = APIRouter()


@router.get("/health")
def health() -> dict:
    return {"status": "ok", "app": settings.app_name}


@router.post("/api/v1/detect")
def detect_feed_format(file: UploadFile = File(...)) -> dict:
    # UnsupportedFormatError is turned into a 422 by the app-level handler.
    return {"file_name": file.filename, "format": detect_format(file.filename or "")}


@router.post("/api/v1/parse")
def parse_feed(
    kind: Literal["products", "categories"] = Form("products"),
    file: UploadFile = File(...),
) -> dict:
    result = run_import_feed(file, kind=kind)
    return {
        "kind": result.kind,
        "format": result.format,
        "count": len(result.records),
        "records": [record.to_dict() for record in result.records],
        "errors": result.errors,
    }


@router.post("/api/v1/audit")
def audit_feed(
    language: str = Form("cs"),
    min_length: int = Form(100),
    file: UploadFile = File(...),
    categories_file: UploadFile | None = File(None),
) -> dict:
    report, feed_errors = run_audit(file, categories_file, language=language, min_length=min_length)
    return {
        "report": report.to_dict(),
        "summary": summarize(report).to_dict(),
        "feed_errors": feed_errors,
    }


@router.post("/api/v1/export/codes.csv")
def export_codes_csv(payload: ExportCodesRequest) -> Response:
    try:
        exported = export_product_codes(payload.issues, payload.label)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return Response(
        content=exported.csv_bytes,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{exported.filename}"'},
    )
