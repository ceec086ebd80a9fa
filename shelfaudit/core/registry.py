"""Minimal registry for feed container parsers."""


from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

ParserFn = Callable[..., list[dict[str, Any]]]


@dataclass
class Registry:
    parsers: dict[str, ParserFn] = field(default_factory=dict)

    def register_parser(self, key: str, handler: ParserFn) -> None:
        self.parsers[str(key).strip().lower()] = handler

    def get_parser(self, key: str) -> ParserFn:
        normalized = str(key).strip().lower()
        handler = self.parsers.get(normalized)
        if handler is None:
            raise KeyError(f"No parser registered for key: {normalized}")
        return handler

    def list_parsers(self) -> list[str]:
        return sorted(self.parsers.keys())


_registry = Registry()


def register_parser(key: str, handler: ParserFn) -> None:
    _registry.register_parser(key, handler)


def get_parser(key: str) -> ParserFn:
    return _registry.get_parser(key)


def list_parsers() -> list[str]:
    return _registry.list_parsers()


def _register_builtin_parsers() -> None:
    from .importers.csv import parse_csv
    from .importers.spreadsheet import parse_spreadsheet
    from .importers.xml import parse_xml

    register_parser("csv", lambda data, *, kind="products": parse_csv(data))
    register_parser("spreadsheet", lambda data, *, kind="products": parse_spreadsheet(data))
    register_parser("xml", parse_xml)


_register_builtin_parsers()


__all__ = ["Registry", "get_parser", "list_parsers", "register_parser"]
