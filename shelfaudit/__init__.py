"""Public package entrypoint for the ShelfAudit engine.

This package provides a stable import surface for the catalog feed parsers
and the content audit, plus optional frontend adapters (CLI and FastAPI
server).
"""

from importlib.metadata import PackageNotFoundError, version
from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "AuditReport": ("shelfaudit.core", "AuditReport"),
    "ProductRecord": ("shelfaudit.core", "ProductRecord"),
    "CategoryRecord": ("shelfaudit.core", "CategoryRecord"),
    "analyze": ("shelfaudit.core", "analyze"),
    "app": ("shelfaudit.server.main", "app"),
    "create_app": ("shelfaudit.server.main", "create_app"),
    "import_feed": ("shelfaudit.core", "import_feed"),
    "parse_category_feed": ("shelfaudit.core", "parse_category_feed"),
    "parse_product_feed": ("shelfaudit.core", "parse_product_feed"),
    "summarize": ("shelfaudit.core", "summarize"),
}

try:
    __version__ = version("shelfaudit")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "AuditReport",
    "CategoryRecord",
    "ProductRecord",
    "__version__",
    "analyze",
    "app",
    "create_app",
    "import_feed",
    "parse_category_feed",
    "parse_product_feed",
    "summarize",
]


def __getattr__(name: str) -> Any:
    target = _LAZY_EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute_name = target
    module = __import__(module_name, fromlist=[attribute_name])
    value = getattr(module, attribute_name)
    globals()[name] = value
    return value
