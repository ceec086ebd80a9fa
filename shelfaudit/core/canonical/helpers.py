from datetime import date, datetime, timedelta, timezone
import math
import re
from typing import Any

_NUMBER_SANITIZE_RE = re.compile(r"\s+")
_DIGITS_RE = re.compile(r"^\d+(\.\d+)?$")

TRUTHY_TOKENS = frozenset({"1", "true", "yes", "y", "ano", "on"})

SPREADSHEET_EPOCH = datetime(1899, 12, 30)

DATE_FORMATS = (
    "%d.%m.%Y %H:%M:%S",
    "%d.%m.%Y %H:%M",
    "%d.%m.%Y",
    "%d. %m. %Y",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%d/%m/%Y",
)


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    if isinstance(value, (list, tuple, set, dict)):
        return not value
    return not str(value).strip()


def clean_text(value: Any) -> str:
    if is_blank(value):
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def parse_number(value: Any) -> float | None:
    if is_blank(value) or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        number = float(value)
        return None if math.isinf(number) else number

    cleaned = _NUMBER_SANITIZE_RE.sub("", str(value)).replace(",", ".", 1)
    try:
        number = float(cleaned)
    except ValueError:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def parse_int(value: Any) -> int | None:
    number = parse_number(value)
    if number is None:
        return None
    return int(number)


def parse_bool(value: Any) -> bool:
    if is_blank(value):
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    return str(value).strip().lower() in TRUTHY_TOKENS


def parse_date(value: Any) -> datetime | None:
    if is_blank(value) or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        return naive_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if hasattr(value, "to_pydatetime"):
        return naive_utc(value.to_pydatetime())

    if isinstance(value, (int, float)):
        return _from_serial(float(value))

    text = str(value).strip()
    if _DIGITS_RE.match(text):
        return _from_serial(float(text))

    try:
        return naive_utc(datetime.fromisoformat(text.replace("Z", "+00:00")))
    except ValueError:
        pass
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def split_tokens(value: Any, *, sep: str = ",") -> list[str]:
    if isinstance(value, (list, tuple)):
        items = [clean_text(item) for item in value]
    else:
        text = clean_text(value)
        if not text:
            return []
        items = [token.strip() for token in text.split(sep)]
    seen: set[str] = set()
    out: list[str] = []
    for token in items:
        if not token or token in seen:
            continue
        seen.add(token)
        out.append(token)
    return out


def format_number(value: float | None, *, decimals: int = 2) -> str:
    if value is None:
        return ""
    return f"{value:.{decimals}f}".rstrip("0").rstrip(".")


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def days_between(earlier: datetime, later: datetime) -> float:
    return (later - earlier).total_seconds() / 86400


def _from_serial(days: float) -> datetime | None:
    if math.isnan(days) or math.isinf(days):
        return None
    try:
        return SPREADSHEET_EPOCH + timedelta(days=days)
    except OverflowError:
        return None


def naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


__all__ = [
    "DATE_FORMATS",
    "SPREADSHEET_EPOCH",
    "TRUTHY_TOKENS",
    "clean_text",
    "days_between",
    "format_number",
    "is_blank",
    "naive_utc",
    "parse_bool",
    "parse_date",
    "parse_int",
    "parse_number",
    "split_tokens",
    "utcnow",
]
