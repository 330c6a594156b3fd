from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QMarginsF
from PyQt6.QtGui import QPageLayout, QPageSize, QTextDocument
from PyQt6.QtPrintSupport import QPrinter

from staticdoc.domain.interfaces import IDocumentRenderer, IExporter
from staticdoc.domain.models import Document
from staticdoc.utils.constants import DEFAULT_STYLESHEET

logger = logging.getLogger(__name__)


class PdfExporter(IExporter):
    """
    Prints the rendered page to an A4 PDF through QTextDocument.

    Needs a QGuiApplication. QTextDocument cannot follow the page's <link>, so the
    default stylesheet is applied as the document's default style sheet instead.
    """

    name = "pdf"
    file_ext = "pdf"

    def __init__(self, renderer: IDocumentRenderer, margin_mm: float = 12.7) -> None:
        self._renderer = renderer
        self.margin_mm = margin_mm

    def export(self, document: Document, out_path: Path) -> None:
        out_path.parent.mkdir(parents=True, exist_ok=True)

        printer = QPrinter(QPrinter.PrinterMode.HighResolution)
        printer.setOutputFormat(QPrinter.OutputFormat.PdfFormat)
        printer.setOutputFileName(str(out_path))
        m = self.margin_mm
        layout = QPageLayout(
            QPageSize(QPageSize.PageSizeId.A4),
            QPageLayout.Orientation.Portrait,
            QMarginsF(m, m, m, m),
            QPageLayout.Unit.Millimeter,
        )
        printer.setPageLayout(layout)

        doc = QTextDocument()
        doc.setDefaultStyleSheet(DEFAULT_STYLESHEET)
        doc.setHtml(self._renderer.to_html(document))
        doc.print(printer)
        logger.info("Wrote %s", out_path)
