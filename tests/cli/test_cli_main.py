import json

import pytest

from shelfaudit.cli.main import main

PRODUCTS_CSV = (
    "code;name;description;price;stock\n"
    "A1;Keramický hrnek;<p>Lorem ipsum dolor sit amet</p>;0;-5\n"
    "A2;Talíř mělký;<p>Mělký talíř z porcelánu, který je vhodný do myčky i do mikrovlnné trouby.</p>;350;4\n"
)


@pytest.fixture
def products_feed(tmp_path):
    path = tmp_path / "products.csv"
    path.write_text(PRODUCTS_CSV, encoding="utf-8")
    return path


def test_detect_command(products_feed, capsys) -> None:
    assert main(["detect", str(products_feed)]) == 0

    assert json.loads(capsys.readouterr().out) == {"file_name": "products.csv", "format": "csv"}


def test_parse_command_writes_records(products_feed, tmp_path, capsys) -> None:
    out = tmp_path / "records.json"

    assert main(["parse", str(products_feed), "--out", str(out)]) == 0

    assert json.loads(capsys.readouterr().out)["count"] == 2
    payload = json.loads(out.read_text(encoding="utf-8"))
    assert [record["code"] for record in payload["records"]] == ["A1", "A2"]


def test_audit_command_prints_report_and_summary(products_feed, tmp_path, capsys) -> None:
    report_path = tmp_path / "report.json"

    assert main(["audit", str(products_feed), "--language", "cs", "--report", str(report_path)]) == 0

    printed = json.loads(capsys.readouterr().out)
    assert printed["report"]["product_count"] == 2
    assert printed["summary"]["overall"] == printed["report"]["scores"]["overall"]
    assert json.loads(report_path.read_text(encoding="utf-8")) == printed


def test_audit_command_summary_text(products_feed, capsys) -> None:
    assert main(["audit", str(products_feed), "--summary"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("PRODUCT CONTENT AUDIT")
    assert "Products: 2" in out


def test_export_codes_command(products_feed, tmp_path, capsys) -> None:
    report_path = tmp_path / "report.json"
    codes_path = tmp_path / "codes.csv"
    main(["audit", str(products_feed), "--report", str(report_path)])
    capsys.readouterr()

    assert main(
        ["export-codes", str(report_path), "--dimension", "business", "--type", "zero_price", "--out", str(codes_path)]
    ) == 0

    result = json.loads(capsys.readouterr().out)
    assert result["codes"] == 1
    assert result["filename"] == "products-business-zero-price-20260208T000000Z.csv"
    assert codes_path.read_text(encoding="utf-8") == "code\nA1\n"


def test_errors_exit_with_status_two(tmp_path, capsys) -> None:
    feed = tmp_path / "feed.json"
    feed.write_text("{}", encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        main(["parse", str(feed)])

    assert exc_info.value.code == 2
    assert capsys.readouterr().err.startswith("error: Unsupported feed file type")
