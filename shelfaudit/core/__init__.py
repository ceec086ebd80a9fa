"""Core audit engine API.

The core layer is framework-agnostic and safe to import from scripts, tests,
CLI commands, and web frontends.
"""

from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "AuditConfig": ("shelfaudit.core.config", "AuditConfig"),
    "AuditReport": ("shelfaudit.core.audit.report", "AuditReport"),
    "AuditSummary": ("shelfaudit.core.audit.summary", "AuditSummary"),
    "CategoryRecord": ("shelfaudit.core.canonical.entities", "CategoryRecord"),
    "FeedError": ("shelfaudit.core.errors", "FeedError"),
    "FeedResult": ("shelfaudit.core.api", "FeedResult"),
    "Issue": ("shelfaudit.core.audit.report", "Issue"),
    "ProductRecord": ("shelfaudit.core.canonical.entities", "ProductRecord"),
    "UnsupportedFormatError": ("shelfaudit.core.errors", "UnsupportedFormatError"),
    "analyze": ("shelfaudit.core.api", "analyze"),
    "config_from_env": ("shelfaudit.core.config", "config_from_env"),
    "detect_format": ("shelfaudit.core.detect", "detect_format"),
    "export_product_codes": ("shelfaudit.core.api", "export_product_codes"),
    "get_parser": ("shelfaudit.core.registry", "get_parser"),
    "import_feed": ("shelfaudit.core.api", "import_feed"),
    "list_parsers": ("shelfaudit.core.registry", "list_parsers"),
    "parse_category_feed": ("shelfaudit.core.api", "parse_category_feed"),
    "parse_product_feed": ("shelfaudit.core.api", "parse_product_feed"),
    "register_parser": ("shelfaudit.core.registry", "register_parser"),
    "summarize": ("shelfaudit.core.api", "summarize"),
    "summary_text": ("shelfaudit.core.api", "summary_text"),
}

__all__ = sorted(_LAZY_EXPORTS)


def __getattr__(name: str) -> Any:
    target = _LAZY_EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute_name = target
    module = __import__(module_name, fromlist=[attribute_name])
    value = getattr(module, attribute_name)
    globals()[name] = value
    return value
