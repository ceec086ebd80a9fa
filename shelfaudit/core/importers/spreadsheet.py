"""Spreadsheet feed parser (first sheet only)."""

import io
import logging
from datetime import datetime
from typing import Any

import pandas as pd

from .common import FeedError, RawRow, is_empty_row, normalize_newlines

logger = logging.getLogger(__name__)


def _cell_value(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, pd.Timestamp):
        return None if pd.isna(value) else value.to_pydatetime()
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        return normalize_newlines(value).strip()
    if isinstance(value, bool):
        return value
    if pd.isna(value):
        return None
    if hasattr(value, "item"):
        # numpy scalars
        return value.item()
    return value


def frame_rows(frame: pd.DataFrame) -> list[RawRow]:
    headers = [str(column).strip() for column in frame.columns]
    rows: list[RawRow] = []
    for values in frame.itertuples(index=False, name=None):
        row: RawRow = {}
        for header, raw in zip(headers, values):
            if not header or header.startswith("Unnamed:"):
                continue
            value = _cell_value(raw)
            if value is None or value == "":
                continue
            row[header] = value
        if is_empty_row(row):
            continue
        rows.append(row)
    return rows


def parse_spreadsheet(data: bytes) -> list[RawRow]:
    if not data:
        return []
    try:
        frame = pd.read_excel(io.BytesIO(data), sheet_name=0, dtype=object)
    except Exception as exc:
        raise FeedError(f"Unable to read spreadsheet: {exc}") from exc
    logger.debug("Read spreadsheet with %d row(s) and %d column(s).", len(frame.index), len(frame.columns))
    return frame_rows(frame)


__all__ = ["frame_rows", "parse_spreadsheet"]
