"""Exporter strategies and registry."""

from .base import ExporterRegistryInst
from .html_exporter import HtmlExporter
from .pdf_exporter import PdfExporter
from .text_exporter import TextExporter

__all__ = ["ExporterRegistryInst", "HtmlExporter", "PdfExporter", "TextExporter"]
