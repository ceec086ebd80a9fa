"""Category tree structure checks.

With a category feed the true parent links are walked; without one the tree
is rebuilt from product breadcrumbs.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from ...canonical import CategoryRecord, ProductRecord
from ..report import Issue, category_issue

MAX_CATEGORY_DEPTH = 4
PATH_SEPARATOR = " > "
_PATH_SPLIT_RE = re.compile(r"[>|/]")


def split_path(path: str) -> list[str]:
    return [part.strip() for part in _PATH_SPLIT_RE.split(path or "") if part.strip()]


def normalize_path(path: str) -> str:
    return PATH_SEPARATOR.join(split_path(path))


@dataclass
class CategoryNode:
    path: str
    name: str
    depth: int
    product_count: int = 0
    children: set[str] = field(default_factory=set)


@dataclass
class CategoryTree:
    """Category nodes keyed by normalized breadcrumb path."""

    nodes: dict[str, CategoryNode] = field(default_factory=dict)

    def add_path(self, path: str) -> CategoryNode | None:
        parts = split_path(path)
        node: CategoryNode | None = None
        for depth in range(1, len(parts) + 1):
            key = PATH_SEPARATOR.join(parts[:depth])
            current = self.nodes.get(key)
            if current is None:
                current = CategoryNode(path=key, name=parts[depth - 1], depth=depth)
                self.nodes[key] = current
            if node is not None:
                node.children.add(key)
            node = current
        return node

    @classmethod
    def from_products(cls, products: Iterable[ProductRecord]) -> "CategoryTree":
        tree = cls()
        for product in products:
            leaf = tree.add_path(product.category)
            if leaf is not None:
                leaf.product_count += 1
        return tree


def _duplicate_name_issues(entries: list[tuple[str, str, int | None]]) -> list[Issue]:
    by_name: dict[str, list[tuple[str, str, int | None]]] = {}
    for code, name, count in entries:
        key = name.lower().strip()
        if key:
            by_name.setdefault(key, []).append((code, name, count))
    issues: list[Issue] = []
    for same_name in by_name.values():
        if len(same_name) < 2:
            continue
        for code, name, count in same_name:
            issues.append(
                category_issue(
                    code,
                    name,
                    "duplicate_category_name",
                    "warning",
                    f"Category name is used {len(same_name)} times.",
                    product_count=count,
                )
            )
    return issues


def _analyze_tree(tree: CategoryTree) -> list[Issue]:
    issues: list[Issue] = []
    for node in tree.nodes.values():
        if node.product_count == 0 and not node.children:
            issues.append(
                category_issue(node.path, node.name, "empty_category", "warning", "Category has no products.", product_count=0)
            )
        if node.product_count == 1:
            issues.append(
                category_issue(
                    node.path, node.name, "single_product_category", "warning", "Category holds a single product.", product_count=1
                )
            )
        if node.depth > MAX_CATEGORY_DEPTH:
            issues.append(
                category_issue(
                    node.path,
                    node.name,
                    "too_deep_category",
                    "warning",
                    f"Category is {node.depth} levels deep (at most {MAX_CATEGORY_DEPTH} recommended).",
                    product_count=node.product_count,
                )
            )
    issues.extend(_duplicate_name_issues([(node.path, node.name, node.product_count) for node in tree.nodes.values()]))
    return issues


def category_keys(category: CategoryRecord) -> set[str]:
    keys = {category.code.lower(), category.name.lower()}
    if category.path:
        keys.add(category.path.lower())
        keys.add(normalize_path(category.path).lower())
    keys.discard("")
    return keys


def product_category_keys(product: ProductRecord) -> set[str]:
    keys: set[str] = set()
    for value in (product.default_category, product.category_text):
        value = value.strip()
        if value:
            keys.add(value.lower())
            keys.add(normalize_path(value).lower())
    keys.discard("")
    return keys


def count_products(categories: list[CategoryRecord], products: list[ProductRecord]) -> list[int]:
    """Product count per category: the feed's own figure, else matched products."""
    index: dict[str, set[int]] = {}
    for position, product in enumerate(products):
        for key in product_category_keys(product):
            index.setdefault(key, set()).add(position)
    counts: list[int] = []
    for category in categories:
        if category.product_count is not None:
            counts.append(category.product_count)
            continue
        matched: set[int] = set()
        for key in category_keys(category):
            matched |= index.get(key, set())
        counts.append(len(matched))
    return counts


def _walk_parents(category: CategoryRecord, by_code: dict[str, CategoryRecord]) -> tuple[int, bool]:
    """Return (depth, cycle_found) following ``parent_code`` links."""
    depth = 1
    visited = {category.code}
    parent_code = category.parent_code
    while parent_code and parent_code in by_code:
        if parent_code in visited:
            return depth, True
        visited.add(parent_code)
        depth += 1
        parent_code = by_code[parent_code].parent_code
    return depth, False


def _analyze_feed(categories: list[CategoryRecord], products: list[ProductRecord]) -> list[Issue]:
    issues: list[Issue] = []
    by_code = {category.code: category for category in categories if category.code}
    with_children = {category.parent_code for category in categories if category.parent_code}
    counts = count_products(categories, products)

    considered: list[tuple[str, str, int | None]] = []
    for category, count in zip(categories, counts):
        if not category.is_active and count == 0:
            continue
        code = category.code or category.display_path
        considered.append((code, category.name, count))

        if count == 0 and category.code not in with_children:
            issues.append(category_issue(code, category.name, "empty_category", "warning", "Category has no products.", product_count=0))
        if count == 1:
            issues.append(
                category_issue(
                    code, category.name, "single_product_category", "warning", "Category holds a single product.", product_count=1
                )
            )

        depth, cycle = _walk_parents(category, by_code)
        if depth > MAX_CATEGORY_DEPTH:
            issues.append(
                category_issue(
                    code,
                    category.name,
                    "too_deep_category",
                    "warning",
                    f"Category is {depth} levels deep (at most {MAX_CATEGORY_DEPTH} recommended).",
                    product_count=count,
                )
            )
        if category.parent_code and category.parent_code not in by_code:
            issues.append(
                category_issue(
                    code,
                    category.name,
                    "orphan_category",
                    "error",
                    f"Parent category {category.parent_code} does not exist.",
                    product_count=count,
                )
            )
        elif cycle:
            issues.append(
                category_issue(
                    code,
                    category.name,
                    "orphan_category",
                    "error",
                    "Parent chain loops back on itself.",
                    product_count=count,
                )
            )

        if not category.description.strip():
            issues.append(
                category_issue(
                    code, category.name, "category_no_description", "warning", "Category has no description.", product_count=count
                )
            )
        if not category.is_active and count > 0:
            issues.append(
                category_issue(
                    code,
                    category.name,
                    "hidden_category_with_products",
                    "error",
                    f"Hidden category still holds {count} product(s).",
                    product_count=count,
                )
            )

    issues.extend(_duplicate_name_issues(considered))
    return issues


def analyze_categories(
    products: list[ProductRecord],
    categories: list[CategoryRecord] | None = None,
) -> list[Issue]:
    if categories:
        return _analyze_feed(categories, products)
    return _analyze_tree(CategoryTree.from_products(products))


__all__ = [
    "CategoryNode",
    "CategoryTree",
    "analyze_categories",
    "category_keys",
    "count_products",
    "normalize_path",
    "product_category_keys",
    "split_path",
]
