from shelfaudit.core.audit.duplicates import excerpt, find_duplicates
from shelfaudit.core.audit.rules import analyze_content
from tests.helpers._records import issue_types, make_product


ENGLISH_COPY = "This mug is great for coffee and tea and it will keep your drink warm for hours."


def _words(prefix: str, count: int) -> list[str]:
    return [f"{prefix}{index:02d}" for index in range(count)]


def _pair_text(shared: int) -> tuple[str, str]:
    common = _words("shared", shared)
    return " ".join(common + _words("alpha", 2)), " ".join(common + _words("omega", 2))


def test_clean_product_has_no_content_issues() -> None:
    assert analyze_content([make_product("A1")]) == []


def test_missing_descriptions_report_only_no_description() -> None:
    issues = analyze_content([make_product("A1", description="", short_description="<p> </p>")])

    assert issue_types(issues) == ["no_description"]
    assert issues[0].severity == "error"


def test_too_short_respects_min_length() -> None:
    product = make_product("A1", description="<p>Keramický hrnek na kávu.</p>")

    assert "too_short" in issue_types(analyze_content([product]))
    assert "too_short" not in issue_types(analyze_content([product], min_description_length=10))


def test_same_short_and_long_description() -> None:
    text = "Keramický hrnek na kávu s velkým uchem a dvojitou stěnou, který udrží teplotu nápoje."
    product = make_product("A1", description=text, short_description=text)

    assert "same_short_long" in issue_types(analyze_content([product], min_description_length=10))


def test_placeholder_copy_is_flagged() -> None:
    lorem = make_product("A1", description="<p>Lorem ipsum dolor sit amet, consectetur adipiscing elit.</p>")
    placeholder = make_product("A2", short_description="Cena {{price}} platí do odvolání.")

    types = issue_types(analyze_content([lorem, placeholder]))

    assert "lorem_ipsum" in types
    assert "test_content" in types


def test_wrong_language_depends_on_expected_language() -> None:
    product = make_product("A1", description=ENGLISH_COPY, short_description="")

    issues = analyze_content([product], expected_language="cs", min_description_length=10)
    wrong = [issue for issue in issues if issue.type == "wrong_language"]
    assert len(wrong) == 1
    assert "'en'" in wrong[0].details

    assert "wrong_language" not in issue_types(
        analyze_content([product], expected_language="en", min_description_length=10)
    )


def test_markup_urls_and_emoji_in_description() -> None:
    product = make_product(
        "A1",
        description=(
            "<p>Tento hrnek je vhodný pro kávu a čaj. Více na https://example.com/hrnek</p>"
            + "<div></div>" * 6
            + "\U0001F525" * 6
        ),
    )

    types = issue_types(analyze_content([product], min_description_length=10))

    assert "html_in_description" in types
    assert "url_in_description" in types
    assert "emoji_spam" in types


def test_exact_duplicates_form_one_group_with_every_member() -> None:
    text = "<p>Univerzální popis, který výrobce dodává ke všem hrnkům z této kolekce bez rozdílu.</p>"
    products = [make_product(code, description=text) for code in ("D1", "D2", "D3")]
    products.append(make_product("D4"))

    groups, issues = find_duplicates(products)

    exact = [group for group in groups if group.type == "exact"]
    assert len(exact) == 1
    assert exact[0].products == ("D1", "D2", "D3")
    assert exact[0].similarity == 100

    duplicates = [issue for issue in issues if issue.type == "duplicate_description"]
    assert [issue.subject_code for issue in duplicates] == ["D1", "D2", "D3"]
    assert duplicates[0].related_products == ("D2", "D3")
    assert duplicates[1].related_products == ("D1", "D3")


def test_short_texts_are_not_compared() -> None:
    products = [make_product(code, description="Krátký společný popis.") for code in ("S1", "S2")]

    groups, issues = find_duplicates(products)

    assert groups == []
    assert issues == []


def test_near_duplicates_need_similarity_strictly_above_threshold() -> None:
    above_a, above_b = _pair_text(17)  # 17 / 21 shared words
    groups, issues = find_duplicates(
        [make_product("N1", description=above_a), make_product("N2", description=above_b)]
    )

    assert [(group.type, group.similarity, group.products) for group in groups] == [("near", 81, ("N1", "N2"))]
    assert [(issue.type, issue.subject_code, issue.related_products) for issue in issues] == [
        ("near_duplicate", "N1", ("N2",))
    ]

    for shared in (15, 16):  # 15 / 19 and exactly 16 / 20
        below_a, below_b = _pair_text(shared)
        groups, issues = find_duplicates(
            [make_product("N1", description=below_a), make_product("N2", description=below_b)]
        )
        assert groups == []
        assert issues == []


def test_near_duplicate_pairs_merge_into_one_group() -> None:
    common = _words("shared", 20)
    products = [
        make_product(code, description=" ".join(common + [extra]))
        for code, extra in (("M1", "firstword"), ("M2", "secondword"), ("M3", "thirdword"))
    ]

    groups, issues = find_duplicates(products)

    assert len(groups) == 1
    assert groups[0].products == ("M1", "M2", "M3")
    assert len([issue for issue in issues if issue.type == "near_duplicate"]) == 3


def test_near_duplicate_scan_respects_limit() -> None:
    text_a, text_b = _pair_text(17)
    products = [make_product("N1", description=text_a), make_product("N2", description=text_b)]

    groups, issues = find_duplicates(products, limit=1)

    assert groups == []
    assert issues == []


def test_excerpt_only_marks_truncated_text() -> None:
    assert excerpt("short") == "short"
    assert excerpt("x" * 250) == "x" * 200 + "..."
