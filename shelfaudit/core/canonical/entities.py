from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Literal

from .helpers import naive_utc

RecordKind = Literal["products", "categories"]


@dataclass
class ProductRecord:
    code: str
    name: str = ""
    short_description: str = ""
    description: str = ""
    meta_title: str = ""
    meta_description: str = ""
    default_category: str = ""
    category_text: str = ""
    additional_categories: list[str] = field(default_factory=list)
    price: float | None = None
    price_before_discount: float | None = None
    purchase_price: float | None = None
    availability: str = ""
    availability_in_stock: str = ""
    availability_out_of_stock: str = ""
    delivery_days: float | None = None
    stock: float | None = None
    ean: str = ""
    manufacturer: str = ""
    brand: str = ""
    warranty: str = ""
    weight: float | None = None
    image: str = ""
    image_count: int = 0
    filter_parameters: list[str] = field(default_factory=list)
    parameters: dict[str, str] = field(default_factory=dict)
    is_action: bool = False
    is_new: bool = False
    is_visible: bool = True
    action_end_date: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    parent_code: str = ""

    def __post_init__(self) -> None:
        self.code = _clean_text(self.code)
        self.name = _clean_text(self.name)
        self.parent_code = _clean_text(self.parent_code)
        self.ean = _clean_text(self.ean)
        self.additional_categories = _ordered_unique_strings(self.additional_categories)
        self.filter_parameters = _ordered_unique_strings(self.filter_parameters)
        self.parameters = _clean_parameters(self.parameters)
        if self.image_count < 0:
            self.image_count = 0
        self.action_end_date = _naive_date(self.action_end_date)
        self.created_at = _naive_date(self.created_at)
        self.updated_at = _naive_date(self.updated_at)

    @property
    def is_variant(self) -> bool:
        return bool(self.parent_code)

    @property
    def category(self) -> str:
        """Breadcrumb text when present, else the default category."""
        return self.category_text or self.default_category

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "name": self.name,
            "short_description": self.short_description,
            "description": self.description,
            "meta_title": self.meta_title,
            "meta_description": self.meta_description,
            "default_category": self.default_category,
            "category_text": self.category_text,
            "additional_categories": list(self.additional_categories),
            "price": self.price,
            "price_before_discount": self.price_before_discount,
            "purchase_price": self.purchase_price,
            "availability": self.availability,
            "availability_in_stock": self.availability_in_stock,
            "availability_out_of_stock": self.availability_out_of_stock,
            "delivery_days": self.delivery_days,
            "stock": self.stock,
            "ean": self.ean,
            "manufacturer": self.manufacturer,
            "brand": self.brand,
            "warranty": self.warranty,
            "weight": self.weight,
            "image": self.image,
            "image_count": self.image_count,
            "filter_parameters": list(self.filter_parameters),
            "parameters": dict(self.parameters),
            "is_action": self.is_action,
            "is_new": self.is_new,
            "is_visible": self.is_visible,
            "action_end_date": _date_to_str(self.action_end_date),
            "created_at": _date_to_str(self.created_at),
            "updated_at": _date_to_str(self.updated_at),
            "parent_code": self.parent_code,
        }


@dataclass
class CategoryRecord:
    code: str
    name: str = ""
    parent_code: str = ""
    path: str = ""
    description: str = ""
    is_active: bool = True
    product_count: int | None = None
    order: float | None = None

    def __post_init__(self) -> None:
        self.code = _clean_text(self.code)
        self.name = _clean_text(self.name)
        self.parent_code = _clean_text(self.parent_code)
        self.path = _clean_text(self.path)

    @property
    def display_path(self) -> str:
        return self.path or self.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "name": self.name,
            "parent_code": self.parent_code,
            "path": self.path,
            "description": self.description,
            "is_active": self.is_active,
            "product_count": self.product_count,
            "order": self.order,
        }


def _clean_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _ordered_unique_strings(items: list[Any] | tuple[Any, ...] | None) -> list[str]:
    out: list[str] = []
    seen: set[str] = set()
    for item in items or []:
        cleaned = _clean_text(item)
        if not cleaned or cleaned in seen:
            continue
        seen.add(cleaned)
        out.append(cleaned)
    return out


def _clean_parameters(values: dict[str, Any] | None) -> dict[str, str]:
    out: dict[str, str] = {}
    for key, value in (values or {}).items():
        key_str = _clean_text(key)
        value_str = _clean_text(value)
        if not key_str or not value_str:
            continue
        out[key_str] = value_str
    return out


def _naive_date(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    return naive_utc(value)


def _date_to_str(value: datetime | None) -> str | None:
    if value is None:
        return None
    return value.isoformat()


__all__ = ["CategoryRecord", "ProductRecord", "RecordKind"]
