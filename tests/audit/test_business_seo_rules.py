from datetime import timedelta

from shelfaudit.core.audit.rules import analyze_business, analyze_seo
from shelfaudit.core.audit.rules.seo import page_title
from tests.helpers._records import issue_types, issues_for, make_product


def test_clean_product_has_no_business_issues(fixed_now) -> None:
    assert analyze_business([make_product("A1")], now=fixed_now) == []


def test_price_anomalies(fixed_now) -> None:
    products = [
        make_product("A1", price=0),
        make_product("A2", price=-10),
        make_product("A3", price=900, price_before_discount=500),
        make_product("A4", price=100, price_before_discount=1000),
        make_product("A5", price=5000),
    ]

    issues = analyze_business(products, now=fixed_now)

    assert issues_for(issues, "A1") == ["zero_price"]
    assert issues_for(issues, "A2") == ["negative_price"]
    assert issues_for(issues, "A3") == ["discount_higher_than_price"]
    assert issues_for(issues, "A4") == ["suspicious_discount"]
    assert issues_for(issues, "A5") == ["suspicious_round_price"]
    assert {issue.group for issue in issues} == {"price"}


def test_discount_of_exactly_half_is_fine(fixed_now) -> None:
    product = make_product("A1", price=250, price_before_discount=500)

    assert analyze_business([product], now=fixed_now) == []


def test_availability_conflicts(fixed_now) -> None:
    products = [
        make_product("A1", delivery_days=7),
        make_product("A2", availability="Na dotaz", stock=0, created_at=fixed_now - timedelta(days=120)),
        make_product("A3", availability="Na dotaz", stock=0, created_at=fixed_now - timedelta(days=20)),
    ]

    issues = analyze_business(products, now=fixed_now)

    assert issues_for(issues, "A1") == ["stock_delivery_conflict"]
    assert issues_for(issues, "A2") == ["long_inquiry_product"]
    assert issues_for(issues, "A3") == []
    assert {issue.group for issue in issues} == {"availability"}


def test_promotion_checks(fixed_now) -> None:
    products = [
        make_product("A1", is_action=True, action_end_date=fixed_now - timedelta(days=1)),
        make_product("A2", is_new=True, created_at=fixed_now - timedelta(days=200)),
        make_product("A3", is_action=True),
        make_product(
            "A4",
            is_action=True,
            action_end_date=fixed_now + timedelta(days=60),
            created_at=fixed_now - timedelta(days=90),
        ),
        make_product(
            "A5",
            is_action=True,
            action_end_date=fixed_now + timedelta(days=60),
            created_at=fixed_now - timedelta(days=5),
        ),
        make_product("A6", is_new=True, created_at=fixed_now - timedelta(days=30)),
    ]

    issues = analyze_business(products, now=fixed_now)

    assert issues_for(issues, "A1") == ["expired_action"]
    assert issues_for(issues, "A2") == ["old_product_new_flag"]
    assert issues_for(issues, "A3") == ["permanent_action"]
    assert issues_for(issues, "A4") == ["permanent_action"]
    assert issues_for(issues, "A5") == []
    assert issues_for(issues, "A6") == []
    assert {issue.group for issue in issues} == {"promo"}


def test_zero_price_negative_stock_and_open_promotion(fixed_now) -> None:
    product = make_product("A1", price=0, stock=-5, is_action=True)

    assert issue_types(analyze_business([product], now=fixed_now)) == ["zero_price", "permanent_action"]


def test_clean_product_has_no_seo_issues() -> None:
    assert analyze_seo([make_product("A1")]) == []


def test_meta_length_checks() -> None:
    products = [
        make_product("A1", meta_description=""),
        make_product("A2", meta_description="Krátký meta popis."),
        make_product("A3", meta_description="Dlouhý meta popis hrnku " + "a" * 200),
    ]

    issues = analyze_seo(products)

    assert issues_for(issues, "A1") == ["no_meta_description"]
    assert issues_for(issues, "A2") == ["meta_too_short"]
    assert issues_for(issues, "A3") == ["meta_too_long"]


def test_meta_that_repeats_the_title() -> None:
    products = [
        make_product("A1", name="Keramický hrnek Modrý 300 ml", meta_description="keramický hrnek  modrý 300 ML"),
        make_product(
            "A2",
            name="Keramický hrnek Zelený velký na čaj a kávu",
            meta_description="Keramický hrnek Zelený velký na čaj a kávu skladem",
        ),
    ]

    issues = analyze_seo(products)

    assert "meta_same_as_title" in issues_for(issues, "A1")
    a1_same = next(issue for issue in issues if issue.type == "meta_same_as_title")
    assert a1_same.severity == "error"
    assert "meta_contains_title" in issues_for(issues, "A2")
    assert "meta_same_as_title" not in issues_for(issues, "A2")


def test_meta_that_copies_short_description() -> None:
    text = "Oblíbený keramický hrnek do každé domácnosti, vhodný do myčky i mikrovlnné trouby."
    product = make_product("A1", short_description=text, meta_description=text)

    assert issues_for(analyze_seo([product]), "A1") == ["meta_same_as_short_desc"]


def test_meta_that_nearly_copies_short_description() -> None:
    short = "Oblíbený keramický hrnek pro každé ráno, vhodný do myčky i mikrovlnné trouby, objem tři sta mililitrů."
    meta = short.replace("ráno,", "odpoledne,")
    product = make_product("A1", short_description=short, meta_description=meta)

    assert issues_for(analyze_seo([product]), "A1") == ["meta_same_as_short_desc"]


def test_title_length_uses_meta_title_first() -> None:
    products = [
        make_product("A1", name="Hrnek"),
        make_product("A2", name="Hrnek", meta_title="Keramický hrnek na kávu"),
        make_product("A3", name="H" * 80),
    ]

    issues = analyze_seo(products)

    assert page_title(products[1]) == "Keramický hrnek na kávu"
    assert "title_too_short" in issues_for(issues, "A1")
    assert issues_for(issues, "A2") == []
    assert "title_too_long" in issues_for(issues, "A3")


def test_duplicate_meta_description_across_families() -> None:
    meta = "Kvalitní keramický hrnek s uchem, vhodný do myčky i mikrovlnné trouby, skladem ihned."
    products = [
        make_product("ABC1", meta_description=meta),
        make_product("XYZ2", meta_description=meta),
        make_product("XYZ2-B", meta_description=meta),
        make_product("V1", parent_code="ABC1", meta_description=meta),
    ]

    issues = [issue for issue in analyze_seo(products) if issue.type == "duplicate_meta_description"]

    assert [(issue.subject_code, issue.related_products) for issue in issues] == [
        ("ABC1", ("XYZ2", "XYZ2-B")),
        ("XYZ2", ("ABC1",)),
        ("XYZ2-B", ("ABC1",)),
    ]
