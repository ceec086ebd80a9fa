from typing import Any

from shelfaudit.core.canonical import CategoryRecord, ProductRecord


def _description(code: str) -> str:
    specific = " ".join(f"{code.lower()}v{index}" for index in range(12))
    return (
        f"<p>Tento výrobek {code} je vhodný pro každodenní použití a má dlouhou záruku.</p>"
        f"<p>Vlastnosti: {specific}</p>"
    )


def make_product(code: str, **overrides: Any) -> ProductRecord:
    """A product that passes the per-record checks unless overridden."""
    name = overrides.pop("name", f"Kvalitní produkt {code}")
    values: dict[str, Any] = {
        "code": code,
        "name": name,
        "short_description": f"Oblíbený pomocník {code} do každé domácnosti.",
        "description": _description(code),
        "meta_description": f"Kupte {name} se zárukou a rychlým doručením, skladem ihned k odeslání, kód {code}.",
        "default_category": "Kuchyně > Nádobí",
        "price": 499.0,
        "availability": "Skladem",
        "availability_in_stock": "Skladem",
        "availability_out_of_stock": "Vyprodáno",
        "delivery_days": 1,
        "stock": 5,
        "ean": f"EAN{code}",
        "manufacturer": "Acme",
        "image": f"https://cdn.example.com/{code}.jpg",
        "image_count": 3,
        "filter_parameters": ["Barva:černá"],
        "parameters": {"Barva": "černá"},
    }
    values.update(overrides)
    return ProductRecord(**values)


def make_category(code: str, **overrides: Any) -> CategoryRecord:
    values: dict[str, Any] = {
        "code": code,
        "name": f"Kategorie {code}",
        "description": "Popis kategorie.",
    }
    values.update(overrides)
    return CategoryRecord(**values)


def issue_types(issues) -> list[str]:
    return [issue.type for issue in issues]


def issues_for(issues, code: str) -> list[str]:
    return [issue.type for issue in issues if issue.subject_code == code]
