"""Domain layer: interfaces and simple models (dataclasses)."""

from .interfaces import (
    IConfigService,
    IDocumentRenderer,
    IExporter,
    IExporterRegistry,
    IFileService,
    IPageReader,
)
from .models import CodeSample, ContentBlock, Document, Paragraph

__all__ = [
    "IConfigService",
    "IDocumentRenderer",
    "IExporter",
    "IExporterRegistry",
    "IFileService",
    "IPageReader",
    "CodeSample",
    "ContentBlock",
    "Document",
    "Paragraph",
]
