import pytest

from shelfaudit.core.text import (
    check_html_errors,
    count_emoji,
    describe_excessive_html,
    detect_language,
    has_inline_styles,
    has_lorem_ipsum,
    has_test_content,
    has_urls,
    max_tag_depth,
    similarity,
    strip_html,
)


def test_strip_html_removes_tags_and_entities() -> None:
    assert strip_html("<p>Hrnek&nbsp;<b>modrý</b></p>\n<br/>") == "Hrnek modrý"
    assert strip_html(None) == ""


def test_similarity_ignores_short_words_and_case() -> None:
    assert similarity("Modrý HRNEK na kávu", "modrý hrnek na kávu") == 1.0
    assert similarity("a b c", "a b c") == 0.0
    assert similarity("alpha beta gamma delta", "alpha beta gamma omega") == pytest.approx(3 / 5)


@pytest.mark.parametrize(
    "text",
    ["Lorem ipsum dolor", "quis DOLOR SIT AMET", "sed do eiusmod tempor"],
)
def test_has_lorem_ipsum(text: str) -> None:
    assert has_lorem_ipsum(text)


@pytest.mark.parametrize(
    "text",
    ["Test popis produktu", "XXXX", "[TODO] doplnit", "Cena {{price}} Kč", "asdf"],
)
def test_has_test_content(text: str) -> None:
    assert has_test_content(text)


def test_plain_copy_is_not_flagged_as_placeholder() -> None:
    assert not has_test_content("Keramický hrnek s uchem.")
    assert not has_lorem_ipsum("Keramický hrnek s uchem.")


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Tento hrnek je vhodný pro kávu a čaj, který máte rádi.", "cs"),
        ("This mug is great for coffee and tea and it will last for years.", "en"),
        ("Die Tasse ist ideal für Kaffee und Tee und wird lange halten.", "de"),
        ("12345 67890", "unknown"),
    ],
)
def test_detect_language(text: str, expected: str) -> None:
    assert detect_language(text) == expected


def test_excessive_html_reports_deep_nesting_and_br_runs() -> None:
    deep = "<div>" * 9 + "x" + "</div>" * 9
    assert max_tag_depth(deep) == 9
    assert "nested 9 levels" in describe_excessive_html(deep)

    breaks = "a<br><br><br>b<br/><br/><br/>c<br><br><br>d<br><br><br>e"
    assert "4 runs" in describe_excessive_html(breaks)

    assert describe_excessive_html("<p>Ok <b>text</b></p>") is None


def test_urls_and_emoji() -> None:
    assert has_urls("Více na https://example.com/hrnek")
    assert not has_urls("Více na našem webu")
    assert count_emoji("Super \U0001F525\U0001F525 \u2600") == 3


def test_check_html_errors_reports_unbalanced_tags() -> None:
    assert check_html_errors("<p>Ok<br><img src='a.jpg'></p>") is None
    assert check_html_errors("<p><b>Bold</p>") == "Unexpected closing tag </p>."
    assert check_html_errors("<div><p>Open") == "Unclosed tags: <div>, <p>."


def test_has_inline_styles() -> None:
    assert has_inline_styles('<span style="color: red">Akce</span>')
    assert not has_inline_styles('<span class="sale">Akce</span>')
