"""Column alias tables for product and category feeds.

Each canonical field lists its candidate source columns in priority order:
the canonical camelCase name, the UPPER_SNAKE export/XML tag, then localized
(Czech) labels. The first alias holding a non-empty value wins.
"""

from dataclasses import dataclass
from typing import Literal

Coercion = Literal["text", "number", "int", "bool", "date", "list"]


@dataclass(frozen=True)
class FieldSpec:
    name: str
    aliases: tuple[str, ...]
    coerce: Coercion = "text"
    default: object = None


PRODUCT_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("code", ("code", "CODE", "Kód", "kod", "sku", "SKU", "ITEM_ID")),
    FieldSpec("name", ("name", "NAME", "Název", "PRODUCTNAME", "PRODUCT", "title", "TITLE")),
    FieldSpec(
        "short_description",
        ("shortDescription", "SHORT_DESCRIPTION", "Krátký popis", "perex", "PEREX"),
    ),
    FieldSpec("description", ("description", "DESCRIPTION", "Popis", "Dlouhý popis")),
    FieldSpec(
        "meta_title",
        ("metaTitle", "META_TITLE", "seoTitle", "SEO_TITLE", "Meta titulek", "SEO titulek"),
    ),
    FieldSpec(
        "meta_description",
        (
            "metaDescription",
            "META_DESCRIPTION",
            "seoDescription",
            "SEO_DESCRIPTION",
            "Meta popis",
            "SEO popis",
        ),
    ),
    FieldSpec(
        "default_category",
        ("defaultCategory", "DEFAULT_CATEGORY", "Kategorie", "Výchozí kategorie", "CATEGORY"),
    ),
    FieldSpec(
        "category_text",
        ("categoryText", "CATEGORY_TEXT", "CATEGORYTEXT", "Cesta kategorie"),
    ),
    FieldSpec(
        "additional_categories",
        ("additionalCategories", "ADDITIONAL_CATEGORIES", "Další kategorie"),
        "list",
    ),
    FieldSpec("price", ("price", "PRICE", "PRICE_VAT", "Cena", "Cena s DPH"), "number"),
    FieldSpec(
        "price_before_discount",
        (
            "priceBeforeDiscount",
            "PRICE_BEFORE_DISCOUNT",
            "STANDARD_PRICE",
            "Cena před slevou",
            "Původní cena",
        ),
        "number",
    ),
    FieldSpec("purchase_price", ("purchasePrice", "PURCHASE_PRICE", "Nákupní cena"), "number"),
    FieldSpec("availability", ("availability", "AVAILABILITY", "Dostupnost")),
    FieldSpec(
        "availability_in_stock",
        (
            "availabilityInStock",
            "AVAILABILITY_IN_STOCK",
            "Dostupnost skladem",
            "Dostupnost při skladové zásobě",
        ),
    ),
    FieldSpec(
        "availability_out_of_stock",
        (
            "availabilityOutOfStock",
            "AVAILABILITY_OUT_OF_STOCK",
            "Dostupnost vyprodáno",
            "Dostupnost při vyprodání",
        ),
    ),
    FieldSpec(
        "delivery_days",
        ("deliveryDays", "DELIVERY_DAYS", "DELIVERY_DATE", "Dodací doba", "Doba dodání"),
        "number",
    ),
    FieldSpec("stock", ("stock", "STOCK", "AMOUNT", "Sklad", "Skladem", "Množství"), "number"),
    FieldSpec("ean", ("ean", "EAN", "GTIN", "gtin")),
    FieldSpec(
        "manufacturer",
        ("manufacturer", "MANUFACTURER", "Výrobce", "brand", "BRAND", "Značka"),
    ),
    FieldSpec("brand", ("brand", "BRAND", "Značka")),
    FieldSpec("warranty", ("warranty", "WARRANTY", "Záruka")),
    FieldSpec("weight", ("weight", "WEIGHT", "Váha", "Hmotnost"), "number"),
    FieldSpec("image", ("image", "IMAGE", "IMGURL", "Obrázek", "Hlavní obrázek")),
    FieldSpec("is_action", ("isAction", "IS_ACTION", "ACTION", "Akce", "V akci"), "bool"),
    FieldSpec("is_new", ("isNew", "IS_NEW", "NEW", "Novinka"), "bool"),
    FieldSpec(
        "is_visible",
        ("visible", "VISIBLE", "isVisible", "Viditelný", "Aktivní"),
        "bool",
        default=True,
    ),
    FieldSpec("action_end_date", ("actionEndDate", "ACTION_END_DATE", "Konec akce"), "date"),
    FieldSpec(
        "created_at",
        ("createdAt", "CREATED_AT", "CREATION_DATE", "Vytvořeno", "Datum vytvoření"),
        "date",
    ),
    FieldSpec(
        "updated_at",
        ("updatedAt", "UPDATED_AT", "Upraveno", "Datum úpravy"),
        "date",
    ),
    FieldSpec(
        "parent_code",
        ("parentCode", "PARENT_CODE", "ITEMGROUP_ID", "Rodičovský kód", "Kód rodiče"),
    ),
)


CATEGORY_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("code", ("code", "CODE", "Kód", "guid", "GUID", "id", "ID")),
    FieldSpec("name", ("name", "NAME", "Název", "Jméno", "TITLE")),
    FieldSpec(
        "parent_code",
        (
            "parentCode",
            "PARENT_CODE",
            "parentGuid",
            "PARENT_GUID",
            "PARENT_ID",
            "Rodičovská kategorie",
            "Kód rodiče",
        ),
    ),
    FieldSpec("path", ("path", "PATH", "Cesta", "categoryText", "CATEGORY_TEXT")),
    FieldSpec("description", ("description", "DESCRIPTION", "Popis")),
    FieldSpec(
        "is_active",
        ("active", "ACTIVE", "Aktivní", "visible", "VISIBLE"),
        "bool",
        default=True,
    ),
    FieldSpec("product_count", ("productCount", "PRODUCT_COUNT", "Počet produktů"), "int"),
    FieldSpec("order", ("order", "ORDER", "Pořadí", "priority", "PRIORITY"), "number"),
)


# Image and parameter columns probed by number.
MAX_NUMBERED_COLUMNS = 20
NUMBERED_IMAGE_ALIASES = ("image{n}", "IMAGE{n}", "IMAGE_{n}", "Obrázek {n}", "additionalImage{n}")
ADDITIONAL_IMAGES_ALIASES = ("additionalImages", "ADDITIONAL_IMAGES", "Další obrázky")
IMAGE_COUNT_ALIASES = ("IMAGE_COUNT", "imageCount")

FILTER_PARAMS_ALIASES = ("filterParams", "FILTER_PARAMS", "Parametry pro filtr")
PARAM_NAME_ALIASES = ("paramName{n}", "PARAM_NAME_{n}", "Parametr {n} název")
PARAM_VALUE_ALIASES = ("paramValue{n}", "PARAM_VALUE_{n}", "Parametr {n} hodnota")
PARAMS_ALIASES = ("PARAMS",)

CATEGORY_PATH_DELIMITERS = ("|", ">", "/", "\\")


__all__ = [
    "ADDITIONAL_IMAGES_ALIASES",
    "CATEGORY_FIELDS",
    "CATEGORY_PATH_DELIMITERS",
    "FILTER_PARAMS_ALIASES",
    "FieldSpec",
    "IMAGE_COUNT_ALIASES",
    "MAX_NUMBERED_COLUMNS",
    "NUMBERED_IMAGE_ALIASES",
    "PARAMS_ALIASES",
    "PARAM_NAME_ALIASES",
    "PARAM_VALUE_ALIASES",
    "PRODUCT_FIELDS",
]
