"""Concrete service implementations and export strategies."""

from .document_renderer import DocumentRenderer
from .file_service import FileService
from .page_reader import PageReader, PageStructureError, RenderedPage

__all__ = ["DocumentRenderer", "FileService", "PageReader", "PageStructureError", "RenderedPage"]
