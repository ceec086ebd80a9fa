import csv
import io
from datetime import datetime, timezone
from typing import Iterable

from slugify import slugify


def ordered_unique(items: Iterable[str]) -> list[str]:
    values: list[str] = []
    seen: set[str] = set()
    for item in items:
        cleaned = (item or "").strip()
        if not cleaned or cleaned in seen:
            continue
        seen.add(cleaned)
        values.append(cleaned)
    return values


def dict_rows_to_csv(rows: list[dict[str, str]], columns: list[str]) -> str:
    output = io.StringIO()
    writer = csv.DictWriter(output, fieldnames=columns, lineterminator="\n")
    writer.writeheader()
    writer.writerows(rows)
    return output.getvalue()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def utc_timestamp_compact(now: datetime | None = None) -> str:
    dt = now or _utcnow()
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    else:
        dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y%m%dT%H%M%SZ")


def make_export_filename(label: str, *, fallback: str = "products", now: datetime | None = None) -> str:
    cleaned = slugify(str(label or ""), separator="-") or fallback
    return f"{cleaned}-{utc_timestamp_compact(now)}.csv"


__all__ = ["dict_rows_to_csv", "make_export_filename", "ordered_unique", "utc_timestamp_compact"]
