# staticdoc/services/document_renderer.py
from __future__ import annotations

import html
import logging
import re

from markdown.inlinepatterns import BACKTICK_RE

from staticdoc.domain.interfaces import IDocumentRenderer
from staticdoc.domain.models import CodeSample, ContentBlock, Document, Paragraph
from staticdoc.utils.constants import PAGE_TEMPLATE

logger = logging.getLogger(__name__)

# python-markdown's code span grammar; group 2 is the fence, group 3 the content
CODE_SPAN = re.compile(BACKTICK_RE)


def code_span_content(fence: str, content: str) -> str:
    """Multi-backtick spans may pad their content with one space on each side."""
    if len(fence) > 1 and len(content) > 2 and content[0] == content[-1] == " ":
        return content[1:-1]
    return content


class DocumentRenderer(IDocumentRenderer):
    """
    Renders a Document into the fixed article page chrome.

    Paragraph text is inline only: everything is escaped except `code spans`,
    which become <code>. Nothing in a paragraph can open a heading, list or
    second block. Code samples are only HTML-escaped: no highlighting,
    whitespace kept as authored.
    """

    def __init__(self, lang: str = "en") -> None:
        self.lang = lang

    def to_html(self, document: Document) -> str:
        body = "\n".join(self.render_block(block) for block in document.blocks)
        page = PAGE_TEMPLATE.format(
            lang=html.escape(self.lang),
            title=html.escape(document.title, quote=False),
            stylesheet=html.escape(document.stylesheet),
            published=html.escape(document.published, quote=False),
            body=body,
        )
        logger.debug("Rendered %r (%d blocks)", document.title, len(document.blocks))
        return page

    # -------------------- helpers --------------------

    def render_block(self, block: ContentBlock) -> str:
        if isinstance(block, CodeSample):
            return self._render_code(block)
        if isinstance(block, Paragraph):
            return self._render_paragraph(block)
        raise TypeError(f"Unsupported content block: {block!r}")

    def _render_paragraph(self, block: Paragraph) -> str:
        text = block.text
        parts: list[str] = []
        pos = 0
        for m in CODE_SPAN.finditer(text):
            if m.group(3) is None:
                # escaped backslashes before a backtick: literal text
                continue
            parts.append(html.escape(text[pos:m.start()], quote=False))
            code = code_span_content(m.group(2), m.group(3))
            parts.append(f"<code>{html.escape(code, quote=False)}</code>")
            pos = m.end()
        parts.append(html.escape(text[pos:], quote=False))
        return f"<p>{''.join(parts)}</p>"

    def _render_code(self, block: CodeSample) -> str:
        cls = f' class="language-{html.escape(block.language)}"' if block.language else ""
        return f"<pre><code{cls}>{html.escape(block.text, quote=False)}</code></pre>"
