import logging
from pathlib import Path

import pytest

from staticdoc.services.stylesheet import resolve_stylesheet, stylesheet_reachable


def test_default_href_resolves_one_level_above_page_dir(tmp_path: Path):
    page = tmp_path / "site" / "golang-testing-with-interfaces" / "index.html"
    assert resolve_stylesheet(page, "../styles.css") == tmp_path / "site" / "styles.css"


def test_sibling_and_nested_hrefs(tmp_path: Path):
    page = tmp_path / "a" / "index.html"
    assert resolve_stylesheet(page, "styles.css") == tmp_path / "a" / "styles.css"
    assert resolve_stylesheet(page, "../css/x%20y.css") == tmp_path / "css" / "x y.css"


def test_absolute_href_rejected(tmp_path: Path):
    with pytest.raises(ValueError):
        resolve_stylesheet(tmp_path / "index.html", "https://example.com/s.css")


def test_reachable_true_when_file_exists(tmp_path: Path):
    (tmp_path / "styles.css").write_text("body{}", encoding="utf-8")
    assert stylesheet_reachable(tmp_path / "post" / "index.html", "../styles.css") is True


def test_missing_stylesheet_warns(tmp_path: Path, caplog):
    with caplog.at_level(logging.WARNING, logger="staticdoc"):
        assert stylesheet_reachable(tmp_path / "post" / "index.html", "../styles.css") is False
    assert "not found" in caplog.text
