import pytest

import shelfaudit
from shelfaudit.core import AuditReport, FeedResult, import_feed, list_parsers


def test_package_exposes_lazy_api() -> None:
    assert shelfaudit.analyze is shelfaudit.core.analyze
    assert "import_feed" in shelfaudit.__all__
    with pytest.raises(AttributeError):
        shelfaudit.not_a_thing  # noqa: B018


def test_builtin_parsers_are_registered() -> None:
    assert list_parsers() == ["csv", "spreadsheet", "xml"]


def test_import_feed_reads_path(tmp_path) -> None:
    feed = tmp_path / "products.csv"
    feed.write_text("code;name\nA1;Hrnek\n", encoding="utf-8")

    result = import_feed(feed)

    assert isinstance(result, FeedResult)
    assert result.format == "csv"
    assert [record.code for record in result.records] == ["A1"]
    assert result.errors == []


def test_import_feed_reports_empty_feed(tmp_path) -> None:
    feed = tmp_path / "categories.xml"
    feed.write_text("<CATEGORIES></CATEGORIES>", encoding="utf-8")

    result = import_feed(str(feed), kind="categories")

    assert result.records == []
    assert result.errors[0]["file"] == "categories.xml"


def test_import_feed_requires_name_for_raw_bytes() -> None:
    with pytest.raises(ValueError):
        import_feed(b"code\nA1\n")


def test_import_feed_rejects_unknown_kind() -> None:
    with pytest.raises(ValueError):
        import_feed(b"code\nA1\n", "feed.csv", kind="orders")  # type: ignore[arg-type]


def test_analyze_returns_report() -> None:
    report = shelfaudit.analyze(import_feed(b"code;name\nA1;Hrnek\n", "feed.csv").records)

    assert isinstance(report, AuditReport)
    assert report.product_count == 1


def test_config_from_env(monkeypatch) -> None:
    from shelfaudit.core import config_from_env

    monkeypatch.setenv("SHELFAUDIT_LANGUAGE", "DE")
    monkeypatch.setenv("SHELFAUDIT_MIN_DESCRIPTION_LENGTH", "250")
    monkeypatch.delenv("SHELFAUDIT_NEAR_DUPLICATE_LIMIT", raising=False)

    config = config_from_env()

    assert config.expected_language == "de"
    assert config.min_description_length == 250
    assert config.near_duplicate_limit == 500

    monkeypatch.setenv("SHELFAUDIT_MIN_DESCRIPTION_LENGTH", "many")
    with pytest.raises(ValueError):
        config_from_env()


def test_server_settings_from_env(monkeypatch) -> None:
    from shelfaudit.config import get_settings

    monkeypatch.setenv("DEBUG", "yes")
    monkeypatch.setenv("LOG_VERBOSITY", "HIGH")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://a.example, https://b.example")
    monkeypatch.setenv("MAX_UPLOAD_BYTES", "-1")
    get_settings.cache_clear()
    try:
        settings = get_settings()
    finally:
        get_settings.cache_clear()

    assert settings.debug is True
    assert settings.log_verbosity == "high"
    assert settings.cors_allow_origins == ("https://a.example", "https://b.example")
    assert settings.max_upload_bytes == 20 * 1024 * 1024
