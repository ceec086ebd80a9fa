"""Audit report types."""


from dataclasses import asdict, dataclass, field, fields
from datetime import datetime
from typing import Any, Iterator, Literal

from ..canonical import ProductRecord

Severity = Literal["error", "warning"]
SubjectKind = Literal["product", "category"]
IssueGroup = Literal["price", "availability", "promo"]

DIMENSIONS = ("content", "completeness", "data_quality", "variants", "stock", "categories", "business", "seo")


@dataclass(frozen=True)
class Issue:
    type: str
    severity: Severity
    details: str
    subject_code: str
    subject_name: str = ""
    subject_kind: SubjectKind = "product"
    related_products: tuple[str, ...] = ()
    group: IssueGroup | None = None
    product_count: int | None = None
    categories: tuple[str, ...] = ()

    @property
    def is_error(self) -> bool:
        return self.severity == "error"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "type": self.type,
            "severity": self.severity,
            "details": self.details,
            "subject_code": self.subject_code,
            "subject_name": self.subject_name,
            "subject_kind": self.subject_kind,
        }
        if self.related_products:
            payload["related_products"] = list(self.related_products)
        if self.group is not None:
            payload["group"] = self.group
        if self.product_count is not None:
            payload["product_count"] = self.product_count
        if self.categories:
            payload["categories"] = list(self.categories)
        return payload


def product_issue(
    product: ProductRecord,
    issue_type: str,
    severity: Severity,
    details: str,
    **extra: Any,
) -> Issue:
    return Issue(
        type=issue_type,
        severity=severity,
        details=details,
        subject_code=product.code,
        subject_name=product.name,
        subject_kind="product",
        **extra,
    )


def category_issue(
    code: str,
    name: str,
    issue_type: str,
    severity: Severity,
    details: str,
    *,
    product_count: int | None = None,
) -> Issue:
    return Issue(
        type=issue_type,
        severity=severity,
        details=details,
        subject_code=code,
        subject_name=name,
        subject_kind="category",
        product_count=product_count,
    )


@dataclass(frozen=True)
class DuplicateGroup:
    type: Literal["exact", "near"]
    similarity: int
    products: tuple[str, ...]
    text: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "similarity": self.similarity,
            "products": list(self.products),
            "text": self.text,
        }


@dataclass(frozen=True)
class IssueSet:
    content: tuple[Issue, ...] = ()
    completeness: tuple[Issue, ...] = ()
    data_quality: tuple[Issue, ...] = ()
    variants: tuple[Issue, ...] = ()
    stock: tuple[Issue, ...] = ()
    categories: tuple[Issue, ...] = ()
    business: tuple[Issue, ...] = ()
    seo: tuple[Issue, ...] = ()

    def by_dimension(self) -> dict[str, tuple[Issue, ...]]:
        return {dimension: getattr(self, dimension) for dimension in DIMENSIONS}

    def __iter__(self) -> Iterator[Issue]:
        for dimension in DIMENSIONS:
            yield from getattr(self, dimension)

    def __len__(self) -> int:
        return sum(len(getattr(self, dimension)) for dimension in DIMENSIONS)

    def of_type(self, issue_type: str) -> list[Issue]:
        return [issue for issue in self if issue.type == issue_type]

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        return {dimension: [issue.to_dict() for issue in issues] for dimension, issues in self.by_dimension().items()}


@dataclass(frozen=True)
class AuditStats:
    with_description: int = 0
    with_short_description: int = 0
    avg_description_length: int = 0
    avg_short_description_length: int = 0
    with_price: int = 0
    with_stock: int = 0
    in_action: int = 0
    with_images: int = 0
    avg_image_count: float = 0.0
    with_ean: int = 0
    with_manufacturer: int = 0
    with_category: int = 0
    with_variants: int = 0
    total_variants: int = 0
    total_categories: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class AuditScores:
    uniqueness: int = 100
    quality: int = 100
    completeness: int = 100
    business: int = 100
    data_quality: int = 100
    stock: int = 100
    categories: int = 100
    seo: int = 100
    overall: int = 100

    def dimension_scores(self) -> dict[str, int]:
        return {item.name: getattr(self, item.name) for item in fields(self) if item.name != "overall"}

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class AuditReport:
    product_count: int
    analyzed_at: datetime
    issues: IssueSet = field(default_factory=IssueSet)
    duplicate_groups: tuple[DuplicateGroup, ...] = ()
    stats: AuditStats = field(default_factory=AuditStats)
    scores: AuditScores = field(default_factory=AuditScores)
    errors: tuple[dict[str, str], ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "product_count": self.product_count,
            "analyzed_at": self.analyzed_at.isoformat(),
            "issues": self.issues.to_dict(),
            "duplicate_groups": [group.to_dict() for group in self.duplicate_groups],
            "stats": self.stats.to_dict(),
            "scores": self.scores.to_dict(),
            "errors": [dict(error) for error in self.errors],
        }


__all__ = [
    "DIMENSIONS",
    "AuditReport",
    "AuditScores",
    "AuditStats",
    "DuplicateGroup",
    "Issue",
    "IssueGroup",
    "IssueSet",
    "Severity",
    "SubjectKind",
    "category_issue",
    "product_issue",
]
