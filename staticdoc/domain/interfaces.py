from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from staticdoc.domain.models import Document

if TYPE_CHECKING:
    from staticdoc.services.page_reader import RenderedPage


class IDocumentRenderer(Protocol):
    """Convert a Document to a full HTML page string."""

    def to_html(self, document: Document) -> str: ...


class IPageReader(Protocol):
    """Recover title, date, stylesheet links and content blocks from a rendered page."""

    def read(self, html: str) -> RenderedPage: ...
    def to_plain_text(self, html: str) -> str: ...


class IFileService(Protocol):
    """Read/write text files. Writes should be atomic when possible."""

    def read_text(self, path: Path) -> str: ...
    def write_text_atomic(self, path: Path, text: str) -> None: ...


class IConfigService(Protocol):
    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_float(
        self, section: str, key: str, default: float | None = None
    ) -> float | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def as_dict(self) -> Mapping[str, Mapping[str, str]]: ...


class IExporter(ABC):
    """Export strategy interface. Implementations write a Document to a given path."""

    name: str  # e.g. "html", "pdf"
    file_ext: str  # e.g. "html"

    @abstractmethod
    def export(self, document: Document, out_path: Path) -> None:
        raise NotImplementedError


class IExporterRegistry(Protocol):
    def register(self, e: IExporter) -> None: ...
    def get(self, name: str) -> IExporter: ...
    def names(self) -> list[str]: ...
    def all(self) -> list[IExporter]: ...
