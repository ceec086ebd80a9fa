"""Pure text helpers shared by the audit rules.

Every detector works on raw description markup or plain text and holds no
state; the patterns live in module constants so rules and tests can share
them.
"""

import re

_TAG_RE = re.compile(r"<[^>]*>")
_WHITESPACE_RE = re.compile(r"\s+")
_ENTITY_REPLACEMENTS = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
)

LOREM_IPSUM_PATTERNS = (
    re.compile(r"lorem\s+ipsum", re.IGNORECASE),
    re.compile(r"dolor\s+sit\s+amet", re.IGNORECASE),
    re.compile(r"consectetur\s+adipiscing", re.IGNORECASE),
    re.compile(r"sed\s+do\s+eiusmod", re.IGNORECASE),
)

# Deliberately loose; "tbd" and "xxx" also hit inside longer words.
TEST_CONTENT_PATTERNS = (
    re.compile(r"test\s*(popis|description|text)", re.IGNORECASE),
    re.compile(r"xxx+", re.IGNORECASE),
    re.compile(r"\[todo\]", re.IGNORECASE),
    re.compile(r"\[placeholder\]", re.IGNORECASE),
    re.compile(r"\{\{.*?\}\}", re.DOTALL),
    re.compile(r"doplnit", re.IGNORECASE),
    re.compile(r"tbd", re.IGNORECASE),
    re.compile(r"asdf", re.IGNORECASE),
    re.compile(r"qwerty", re.IGNORECASE),
)

CZECH_WORDS = frozenset(
    {
        "a", "v", "na", "je", "se", "do", "pro", "jsou", "má", "jeho", "která", "který", "které", "při",
        "jako", "nebo", "také", "jen", "ale", "pak", "tak", "již", "být", "více", "pouze", "všech", "vám",
        "jejich",
    }
)
GERMAN_WORDS = frozenset(
    {
        "und", "der", "die", "das", "ist", "für", "mit", "auf", "des", "den", "von", "sind", "wird", "bei",
        "nach", "aus", "oder", "wie", "auch", "kann",
    }
)
ENGLISH_WORDS = frozenset(
    {
        "the", "and", "is", "for", "with", "on", "of", "are", "will", "at", "from", "or", "as", "can", "be",
        "this", "that", "have", "has", "an", "by", "it", "not", "you", "we",
    }
)
CZECH_CHARS_RE = re.compile(r"[ěščřžýáíéůúďťň]")
GERMAN_CHARS_RE = re.compile(r"[äöüß]")
LANGUAGES = ("cs", "en", "de")
UNKNOWN_LANGUAGE = "unknown"
_WORD_HIT_SCORE = 2
_CHAR_HIT_SCORE = 10
_MIN_LANGUAGE_SCORE = 5

MAX_TAG_DEPTH = 8
MAX_EMPTY_TAGS = 5
MAX_BR_RUNS = 3
_EMPTY_TAG_RE = re.compile(r"<(div|span)[^>]*>\s*</\1>", re.IGNORECASE)
_BR_RUN_RE = re.compile(r"(?:<br\s*/?>\s*){3,}", re.IGNORECASE)

URL_RE = re.compile(r"https?://[^\s<]+", re.IGNORECASE)
EMOJI_RE = re.compile("[\U0001F300-\U0001F9FF\U00002600-\U000026FF\U00002700-\U000027BF]")
MAX_EMOJI = 5
INLINE_STYLE_RE = re.compile(r"style\s*=\s*[\"'][^\"']+[\"']", re.IGNORECASE)

VOID_ELEMENTS = frozenset(
    {"br", "hr", "img", "input", "meta", "link", "area", "base", "col", "embed", "source", "track", "wbr"}
)
_NAMED_TAG_RE = re.compile(r"</?([a-zA-Z][a-zA-Z0-9]*)[^>]*/?>")

SIMILARITY_MIN_TOKEN_LENGTH = 3


def strip_html(value: str | None) -> str:
    if not value:
        return ""
    text = _TAG_RE.sub(" ", value)
    for entity, replacement in _ENTITY_REPLACEMENTS:
        text = text.replace(entity, replacement)
    return _WHITESPACE_RE.sub(" ", text).strip()


def normalize_text(value: str | None) -> str:
    if not value:
        return ""
    return _WHITESPACE_RE.sub(" ", value).strip().lower()


def _token_set(text: str) -> set[str]:
    return {word for word in text.lower().split() if len(word) >= SIMILARITY_MIN_TOKEN_LENGTH}


def similarity(first: str | None, second: str | None) -> float:
    """Jaccard index of the two texts' word sets (words of 3+ characters)."""
    words_a = _token_set(first or "")
    words_b = _token_set(second or "")
    if not words_a or not words_b:
        return 0.0
    return len(words_a & words_b) / len(words_a | words_b)


def has_lorem_ipsum(text: str | None) -> bool:
    return bool(text) and any(pattern.search(text) for pattern in LOREM_IPSUM_PATTERNS)


def has_test_content(text: str | None) -> bool:
    return bool(text) and any(pattern.search(text) for pattern in TEST_CONTENT_PATTERNS)


def detect_language(text: str | None) -> str:
    """Guess ``cs``, ``en`` or ``de`` from function words and diacritics.

    Returns ``unknown`` when no language scores at least 5 points. Ties go to
    Czech, then German, then English.
    """
    stripped = strip_html(text).lower()
    scores = {"cs": 0, "de": 0, "en": 0}
    for word in stripped.split():
        if word in CZECH_WORDS:
            scores["cs"] += _WORD_HIT_SCORE
        if word in GERMAN_WORDS:
            scores["de"] += _WORD_HIT_SCORE
        if word in ENGLISH_WORDS:
            scores["en"] += _WORD_HIT_SCORE
    if CZECH_CHARS_RE.search(stripped):
        scores["cs"] += _CHAR_HIT_SCORE
    if GERMAN_CHARS_RE.search(stripped):
        scores["de"] += _CHAR_HIT_SCORE

    best = max(scores.values())
    if best < _MIN_LANGUAGE_SCORE:
        return UNKNOWN_LANGUAGE
    for language in ("cs", "de", "en"):
        if scores[language] == best:
            return language
    return UNKNOWN_LANGUAGE


def max_tag_depth(markup: str) -> int:
    depth = 0
    deepest = 0
    for match in _NAMED_TAG_RE.finditer(markup):
        tag = match.group(0)
        if match.group(1).lower() in VOID_ELEMENTS:
            continue
        if tag.startswith("</"):
            depth = max(depth - 1, 0)
        elif not tag.endswith("/>"):
            depth += 1
            deepest = max(deepest, depth)
    return deepest


def describe_excessive_html(markup: str | None) -> str | None:
    """Explain why ``markup`` counts as excessive HTML, or return ``None``."""
    if not markup:
        return None
    depth = max_tag_depth(markup)
    if depth > MAX_TAG_DEPTH:
        return f"Tags nested {depth} levels deep."
    empty_tags = len(_EMPTY_TAG_RE.findall(markup))
    if empty_tags > MAX_EMPTY_TAGS:
        return f"{empty_tags} empty div/span elements."
    br_runs = len(_BR_RUN_RE.findall(markup))
    if br_runs > MAX_BR_RUNS:
        return f"{br_runs} runs of 3 or more consecutive <br> tags."
    return None


def has_excessive_html(markup: str | None) -> bool:
    return describe_excessive_html(markup) is not None


def has_urls(text: str | None) -> bool:
    return bool(text) and URL_RE.search(text) is not None


def count_emoji(text: str | None) -> int:
    return len(EMOJI_RE.findall(text or ""))


def has_emoji_spam(text: str | None) -> bool:
    return count_emoji(text) > MAX_EMOJI


def check_html_errors(markup: str | None) -> str | None:
    """Return a message for the first unbalanced tag, or ``None`` if balanced."""
    if not markup:
        return None
    open_tags: list[str] = []
    for match in _NAMED_TAG_RE.finditer(markup):
        tag = match.group(0)
        name = match.group(1).lower()
        if name in VOID_ELEMENTS or tag.endswith("/>"):
            continue
        if tag.startswith("</"):
            if not open_tags or open_tags[-1] != name:
                return f"Unexpected closing tag </{name}>."
            open_tags.pop()
        else:
            open_tags.append(name)
    if open_tags:
        return "Unclosed tags: " + ", ".join(f"<{name}>" for name in open_tags) + "."
    return None


def has_inline_styles(markup: str | None) -> bool:
    return bool(markup) and INLINE_STYLE_RE.search(markup) is not None


__all__ = [
    "LANGUAGES",
    "UNKNOWN_LANGUAGE",
    "check_html_errors",
    "count_emoji",
    "describe_excessive_html",
    "detect_language",
    "has_emoji_spam",
    "has_excessive_html",
    "has_inline_styles",
    "has_lorem_ipsum",
    "has_test_content",
    "has_urls",
    "max_tag_depth",
    "normalize_text",
    "similarity",
    "strip_html",
]
