"""Delimited-text feed parser."""

import csv
import io

from .common import RawRow, decode_text_bytes, is_empty_row

MAX_FIELD_SIZE = 10 * 1024 * 1024


def detect_separator(header_line: str) -> str:
    if ";" in header_line:
        return ";"
    if "," in header_line:
        return ","
    if "\t" in header_line:
        return "\t"
    return ","


def csv_rows(text: str) -> tuple[list[str], list[RawRow]]:
    stripped = text.lstrip("\n")
    if not stripped.strip():
        return [], []

    header_line = stripped.split("\n", 1)[0]
    separator = detect_separator(header_line)
    reader = csv.reader(io.StringIO(stripped), delimiter=separator)

    headers = [str(header or "").strip() for header in next(reader, [])]
    rows: list[RawRow] = []
    for values in reader:
        row: RawRow = {}
        for index, header in enumerate(headers):
            if not header:
                continue
            value = values[index] if index < len(values) else ""
            row[header] = value.strip()
        if is_empty_row(row):
            continue
        rows.append(row)
    return headers, rows


def parse_csv(data: bytes) -> list[RawRow]:
    if not data:
        return []
    text = decode_text_bytes(data).replace("\r\n", "\n").replace("\r", "\n")
    previous_limit = csv.field_size_limit(MAX_FIELD_SIZE)
    try:
        _, rows = csv_rows(text)
    finally:
        csv.field_size_limit(previous_limit)
    return rows


__all__ = ["csv_rows", "detect_separator", "parse_csv"]
