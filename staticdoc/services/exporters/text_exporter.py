from __future__ import annotations

import logging
from pathlib import Path

from staticdoc.domain.interfaces import IDocumentRenderer, IExporter, IFileService, IPageReader
from staticdoc.domain.models import Document

logger = logging.getLogger(__name__)


class TextExporter(IExporter):
    """Plain-text flattening of the rendered page (markup stripped, code verbatim)."""

    name = "text"
    file_ext = "txt"

    def __init__(
        self, renderer: IDocumentRenderer, reader: IPageReader, files: IFileService
    ) -> None:
        self._renderer = renderer
        self._reader = reader
        self._files = files

    def export(self, document: Document, out_path: Path) -> None:
        text = self._reader.to_plain_text(self._renderer.to_html(document))
        self._files.write_text_atomic(out_path, text)
        logger.info("Wrote %s", out_path)
