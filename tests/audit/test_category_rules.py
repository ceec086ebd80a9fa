from shelfaudit.core.audit.rules import CategoryTree, analyze_categories, analyze_categorization
from shelfaudit.core.audit.rules.categories import count_products, normalize_path, split_path
from tests.helpers._records import issue_types, issues_for, make_category, make_product


def test_split_and_normalize_paths() -> None:
    assert split_path("Dům | Kuchyně/Hrnky > Keramické") == ["Dům", "Kuchyně", "Hrnky", "Keramické"]
    assert normalize_path(" Dům>Kuchyně ") == "Dům > Kuchyně"
    assert split_path("") == []


def test_tree_rebuilt_from_breadcrumbs() -> None:
    products = [
        make_product("A1", default_category="Dům > Kuchyně"),
        make_product("A2", default_category="Dům > Kuchyně"),
        make_product("A3", default_category="Dům | Zahrada"),
    ]

    tree = CategoryTree.from_products(products)

    assert tree.nodes["Dům"].children == {"Dům > Kuchyně", "Dům > Zahrada"}
    assert tree.nodes["Dům > Kuchyně"].product_count == 2
    assert tree.nodes["Dům > Zahrada"].depth == 2


def test_tree_checks_single_product_and_depth() -> None:
    products = [
        make_product("A1", default_category="A > B > C > D > E"),
        make_product("A2", default_category="Dům > Kuchyně"),
        make_product("A3", default_category="Dům > Kuchyně"),
    ]

    issues = analyze_categories(products)

    assert issues_for(issues, "A > B > C > D > E") == ["single_product_category", "too_deep_category"]
    assert issues_for(issues, "Dům > Kuchyně") == []
    assert all(issue.subject_kind == "category" for issue in issues)


def test_tree_duplicate_category_names() -> None:
    products = [
        make_product("A1", default_category="Dům > Doplňky"),
        make_product("A2", default_category="Dům > Doplňky"),
        make_product("A3", default_category="Zahrada > Doplňky"),
        make_product("A4", default_category="Zahrada > Doplňky"),
    ]

    issues = [issue for issue in analyze_categories(products) if issue.type == "duplicate_category_name"]

    assert sorted(issue.subject_code for issue in issues) == ["Dům > Doplňky", "Zahrada > Doplňky"]


def test_count_products_prefers_feed_figure() -> None:
    categories = [
        make_category("K1", name="Hrnky"),
        make_category("K2", name="Talíře", product_count=7),
    ]
    products = [make_product("A1", default_category="hrnky"), make_product("A2", default_category="K1")]

    assert count_products(categories, products) == [2, 7]


def test_category_feed_checks() -> None:
    categories = [
        make_category("ROOT", name="Dům"),
        make_category("K1", name="Kuchyně", parent_code="ROOT"),
        make_category("K2", name="Prázdná", parent_code="ROOT"),
        make_category("K3", name="Sirotek", parent_code="GONE", description=""),
        make_category("K4", name="Archiv", parent_code="ROOT", is_active=False, product_count=3),
        make_category("K5", name="Skrytá prázdná", parent_code="ROOT", is_active=False),
    ]
    products = [
        make_product("A1", default_category="K1"),
        make_product("A2", default_category="K1"),
        make_product("A3", default_category="Sirotek"),
    ]

    issues = analyze_categories(products, categories)

    assert issues_for(issues, "ROOT") == []
    assert issues_for(issues, "K1") == []
    assert issues_for(issues, "K2") == ["empty_category"]
    assert issues_for(issues, "K3") == ["single_product_category", "orphan_category", "category_no_description"]
    assert issues_for(issues, "K4") == ["hidden_category_with_products"]
    assert issues_for(issues, "K5") == []

    hidden = next(issue for issue in issues if issue.type == "hidden_category_with_products")
    assert hidden.severity == "error"
    assert hidden.product_count == 3


def test_category_feed_depth_and_cycles() -> None:
    categories = [make_category("L1")]
    categories += [make_category(f"L{level}", parent_code=f"L{level - 1}") for level in range(2, 6)]
    categories += [
        make_category("C1", parent_code="C2", product_count=2),
        make_category("C2", parent_code="C1", product_count=2),
    ]

    issues = analyze_categories([], categories)

    assert "too_deep_category" in issues_for(issues, "L5")
    assert "too_deep_category" not in issues_for(issues, "L4")
    assert issues_for(issues, "C1") == ["orphan_category"]
    assert issues_for(issues, "C2") == ["orphan_category"]


def test_categorization_without_feed() -> None:
    products = [
        make_product("A1", default_category=""),
        make_product("A2", default_category="Dům", additional_categories=["Zahrada", "Dům > Kuchyně"]),
        make_product("A3V", parent_code="A3", default_category=""),
    ]

    issues = analyze_categorization(products)

    assert issue_types(issues) == ["no_default_category", "multiple_main_categories"]
    assert issues[1].categories == ("Dům", "Zahrada")


def test_categorization_flags_inactive_default_category() -> None:
    categories = [make_category("K9", name="Výprodej", is_active=False)]
    products = [make_product("A1", default_category="výprodej"), make_product("A2")]

    issues = analyze_categorization(products, categories)

    assert [(issue.type, issue.subject_code, issue.categories) for issue in issues] == [
        ("inactive_category", "A1", ("K9",))
    ]
