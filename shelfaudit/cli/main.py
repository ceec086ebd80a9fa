"""Command-line frontend for the ShelfAudit core engine."""

import argparse
import json
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from shelfaudit.core import (
    analyze,
    config_from_env,
    detect_format,
    export_product_codes,
    import_feed,
    summarize,
    summary_text,
)
from shelfaudit.core.audit.report import DIMENSIONS
from shelfaudit.core.exporters.codes import select_issues

load_dotenv(Path(__file__).resolve().parents[2] / ".env")


def _json_dump(data: Any) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def _cmd_detect(args: argparse.Namespace) -> int:
    _json_dump({"file_name": Path(args.input).name, "format": detect_format(args.input)})
    return 0


def _cmd_parse(args: argparse.Namespace) -> int:
    result = import_feed(args.input, kind=args.kind)
    payload = {
        "kind": result.kind,
        "format": result.format,
        "count": len(result.records),
        "records": [record.to_dict() for record in result.records],
        "errors": result.errors,
    }
    if args.out:
        Path(args.out).write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        _json_dump({"output": args.out, "count": payload["count"], "errors": result.errors})
        return 0
    _json_dump(payload)
    return 0


def _cmd_audit(args: argparse.Namespace) -> int:
    products = import_feed(args.input, kind="products")
    if products.errors:
        raise ValueError(products.errors[0]["detail"])
    categories = None
    if args.categories:
        categories = import_feed(args.categories, kind="categories").records or None

    report = analyze(
        products.records,
        args.language,
        args.min_length,
        categories,
        config=config_from_env(),
    )
    payload = {"report": report.to_dict(), "summary": summarize(report).to_dict()}
    if args.report:
        Path(args.report).write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    if args.summary:
        print(summary_text(report))
        return 0
    _json_dump(payload)
    return 0


def _cmd_export_codes(args: argparse.Namespace) -> int:
    payload = json.loads(Path(args.input).read_text(encoding="utf-8"))
    report_payload = payload.get("report", payload) if isinstance(payload, dict) else {}
    issues = select_issues(report_payload, dimension=args.dimension, issue_type=args.type)
    label = args.label or "-".join(part for part in ("products", args.dimension, args.type) if part)
    exported = export_product_codes(issues, label)
    Path(args.out).write_bytes(exported.csv_bytes)
    _json_dump({"output": args.out, "filename": exported.filename, "codes": len(exported.codes)})
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="shelfaudit", description="ShelfAudit catalog audit CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    detect = subparsers.add_parser("detect", help="Detect the container format of a feed file")
    detect.add_argument("input", help="Feed file path")
    detect.set_defaults(func=_cmd_detect)

    parse = subparsers.add_parser("parse", help="Parse a feed into canonical records")
    parse.add_argument("input", help="Feed file path")
    parse.add_argument("--kind", default="products", choices=["products", "categories"])
    parse.add_argument("--out", default="")
    parse.set_defaults(func=_cmd_parse)

    audit = subparsers.add_parser("audit", help="Audit a product feed")
    audit.add_argument("input", help="Product feed file path")
    audit.add_argument("--categories", default="", help="Optional category feed file path")
    audit.add_argument("--language", default=None, choices=["cs", "en", "de"])
    audit.add_argument("--min-length", type=int, default=None)
    audit.add_argument("--report", default="")
    audit.add_argument("--summary", action="store_true", help="Print a plain-text digest instead of JSON")
    audit.set_defaults(func=_cmd_audit)

    export_codes = subparsers.add_parser("export-codes", help="Export product codes from a saved audit report")
    export_codes.add_argument("input", help="Audit report JSON path")
    export_codes.add_argument("--dimension", default=None, choices=list(DIMENSIONS))
    export_codes.add_argument("--type", default=None, help="Only issues of this type")
    export_codes.add_argument("--label", default="")
    export_codes.add_argument("--out", required=True)
    export_codes.set_defaults(func=_cmd_export_codes)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args) or 0)
    except Exception as exc:
        parser.exit(status=2, message=f"error: {exc}\n")


if __name__ == "__main__":
    raise SystemExit(main())
