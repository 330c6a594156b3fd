from __future__ import annotations

import os

import pytest

# Qt must not look for a display; set before any QApplication exists.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from staticdoc.content import golang_testing_with_interfaces  # noqa: E402
from staticdoc.domain.models import CodeSample, Document, Paragraph  # noqa: E402
from staticdoc.services.document_renderer import DocumentRenderer  # noqa: E402
from staticdoc.services.file_service import FileService  # noqa: E402
from staticdoc.services.page_reader import PageReader  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        if created:
            app.quit()


@pytest.fixture()
def no_user_config(monkeypatch, tmp_path):
    """Point platformdirs at an empty directory so a developer's config.ini never leaks in."""
    monkeypatch.setattr(
        "staticdoc.services.config.ini_config_service.user_config_dir",
        lambda appname: str(tmp_path / "no-user-config" / appname),
    )


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def renderer() -> DocumentRenderer:
    return DocumentRenderer()


@pytest.fixture()
def reader() -> PageReader:
    return PageReader()


@pytest.fixture()
def article() -> Document:
    return golang_testing_with_interfaces()


@pytest.fixture()
def small_doc() -> Document:
    return Document(
        title="Tabs & <Spaces>",
        published="Jan 1st, 2020",
        blocks=(
            Paragraph("Call `run()` first."),
            CodeSample("if a < b && c > d {\n\treturn \"x\"\n}\n\n  // trailing  \n"),
            Paragraph("Then stop."),
        ),
    )
