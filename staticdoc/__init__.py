"""Static article page: document model, HTML rendering and export."""

from staticdoc.domain.models import CodeSample, ContentBlock, Document, Paragraph

__version__ = "1.0.0"

__all__ = ["CodeSample", "ContentBlock", "Document", "Paragraph", "__version__"]
