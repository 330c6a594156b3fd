from __future__ import annotations

from pathlib import Path

from staticdoc.domain.interfaces import IDocumentRenderer, IFileService, IPageReader
from staticdoc.services.config.app_config import AppConfig, build_app_config
from staticdoc.services.document_renderer import DocumentRenderer
from staticdoc.services.exporters.base import ExporterRegistryInst
from staticdoc.services.exporters.html_exporter import HtmlExporter
from staticdoc.services.exporters.pdf_exporter import PdfExporter
from staticdoc.services.exporters.text_exporter import TextExporter
from staticdoc.services.file_service import FileService
from staticdoc.services.page_reader import PageReader


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Registers the built-in exporters (html, text, pdf) in its own registry
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        renderer: IDocumentRenderer | None = None,
        reader: IPageReader | None = None,
        files: IFileService | None = None,
        exporters: ExporterRegistryInst | None = None,
    ) -> None:
        self.config: AppConfig = config or build_app_config()
        self.renderer: IDocumentRenderer = renderer or DocumentRenderer(lang=self.config.lang)
        self.reader: IPageReader = reader or PageReader()
        self.file_service: IFileService = files or FileService()
        self.exporters: ExporterRegistryInst = exporters or ExporterRegistryInst()

        self._ensure_builtin_exporters()

    @staticmethod
    def default(*, config_path: Path | None = None) -> Container:
        return Container(config=build_app_config(explicit_ini=config_path))

    # ---------- Internals ----------

    def _ensure_builtin_exporters(self) -> None:
        names = self.exporters.names()
        if "html" not in names:
            self.exporters.register(
                HtmlExporter(
                    self.renderer,
                    self.file_service,
                    write_stylesheet=self.config.write_stylesheet,
                )
            )
        if "text" not in names:
            self.exporters.register(TextExporter(self.renderer, self.reader, self.file_service))
        if "pdf" not in names:
            self.exporters.register(PdfExporter(self.renderer, margin_mm=self.config.pdf_margin_mm))
