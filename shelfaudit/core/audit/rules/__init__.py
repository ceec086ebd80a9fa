from .business import analyze_business
from .categories import CategoryTree, analyze_categories
from .categorization import analyze_categorization
from .completeness import analyze_completeness
from .content import analyze_content
from .data_quality import analyze_data_quality
from .seo import analyze_seo
from .stock import analyze_stock
from .variants import analyze_variants

__all__ = [
    "CategoryTree",
    "analyze_business",
    "analyze_categories",
    "analyze_categorization",
    "analyze_completeness",
    "analyze_content",
    "analyze_data_quality",
    "analyze_seo",
    "analyze_stock",
    "analyze_variants",
]
