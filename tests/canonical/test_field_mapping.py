from datetime import datetime

import pytest

from shelfaudit.core.canonical import (
    canonicalize,
    canonicalize_categories,
    canonicalize_products,
    parse_bool,
    parse_date,
    parse_number,
)


def test_localized_and_english_headers_map_to_the_same_record() -> None:
    english = {
        "code": "P1",
        "name": "Hrnek",
        "description": "<p>Popis</p>",
        "shortDescription": "Krátký",
        "price": "199,90",
        "stock": "4",
        "manufacturer": "Acme",
        "defaultCategory": "Kuchyně > Hrnky",
    }
    localized = {
        "Kód": "P1",
        "Název": "Hrnek",
        "Popis": "<p>Popis</p>",
        "Krátký popis": "Krátký",
        "Cena": "199,90",
        "Sklad": "4",
        "Výrobce": "Acme",
        "Kategorie": "Kuchyně > Hrnky",
    }

    first = canonicalize_products([english])[0]
    second = canonicalize_products([localized])[0]

    assert first.to_dict() == second.to_dict()
    assert first.price == 199.9
    assert first.category == "Kuchyně > Hrnky"


def test_missing_fields_fall_back_to_defaults() -> None:
    product = canonicalize_products([{"code": "P2"}])[0]

    assert product.name == ""
    assert product.price is None
    assert product.stock is None
    assert product.additional_categories == []
    assert product.is_visible is True
    assert product.is_action is False
    assert product.image_count == 0


def test_additional_categories_split_on_semicolons_and_newlines() -> None:
    product = canonicalize_products([{"code": "P3", "additionalCategories": "Dům; Zahrada\nDům"}])[0]

    assert product.additional_categories == ["Dům", "Zahrada"]


def test_rows_without_identity_are_dropped() -> None:
    rows = [{"name": "No code"}, {"code": "  "}, {"code": "P4"}]

    assert [product.code for product in canonicalize_products(rows)] == ["P4"]


def test_category_without_code_keeps_name() -> None:
    categories = canonicalize_categories([{"name": "Akce"}, {"code": "K9", "path": "Dům | Kuchyně"}])

    assert [category.name for category in categories] == ["Akce", "Kuchyně"]


def test_canonicalize_rejects_unknown_kind() -> None:
    with pytest.raises(ValueError):
        canonicalize([], "orders")  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1 299,50", 1299.5),
        ("12.5", 12.5),
        (7, 7.0),
        ("", None),
        ("n/a", None),
        (float("nan"), None),
    ],
)
def test_parse_number(raw, expected) -> None:
    assert parse_number(raw) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("ano", True), ("Yes", True), ("1", True), ("0", False), ("ne", False), (None, False), (2, True)],
)
def test_parse_bool(raw, expected) -> None:
    assert parse_bool(raw) is expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("31.12.2025", datetime(2025, 12, 31)),
        ("31.12.2025 08:30", datetime(2025, 12, 31, 8, 30)),
        ("2025-12-31", datetime(2025, 12, 31)),
        ("2025-12-31T10:00:00+02:00", datetime(2025, 12, 31, 8, 0)),
        (45000, datetime(2023, 3, 15)),
        ("not a date", None),
    ],
)
def test_parse_date(raw, expected) -> None:
    assert parse_date(raw) == expected
