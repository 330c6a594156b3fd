from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from html.parser import HTMLParser

from staticdoc.domain.interfaces import IPageReader
from staticdoc.domain.models import CodeSample, ContentBlock, Document, Paragraph

logger = logging.getLogger(__name__)

_LANGUAGE_PREFIX = "language-"


class PageStructureError(ValueError):
    """A rendered page does not have exactly one heading, timestamp and stylesheet link."""


@dataclass
class RenderedPage:
    headings: list[str] = field(default_factory=list)
    timestamps: list[str] = field(default_factory=list)
    stylesheets: list[str] = field(default_factory=list)
    blocks: list[ContentBlock] = field(default_factory=list)

    def code_samples(self) -> list[CodeSample]:
        return [b for b in self.blocks if isinstance(b, CodeSample)]

    def to_document(self) -> Document:
        for label, found in (
            ("heading", self.headings),
            ("timestamp", self.timestamps),
            ("stylesheet link", self.stylesheets),
        ):
            if len(found) != 1:
                raise PageStructureError(f"Expected exactly one {label}, found {len(found)}")
        return Document(
            title=self.headings[0],
            published=self.timestamps[0],
            blocks=tuple(self.blocks),
            stylesheet=self.stylesheets[0],
        )


class _ArticleParser(HTMLParser):
    """Single-use parser that fills a RenderedPage while feeding."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.page = RenderedPage()
        self._article_depth = 0
        self._capture: str | None = None  # "h1" | "time" | "p" | "pre"
        self._buf: list[str] = []
        self._language: str | None = None
        self._code: list[str] | None = None  # inline <code> inside a paragraph

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        a = dict(attrs)
        if tag == "link":
            rel = (a.get("rel") or "").lower().split()
            if "stylesheet" in rel and a.get("href"):
                self.page.stylesheets.append(a["href"] or "")
            return
        if tag == "article":
            self._article_depth += 1
            return

        if self._capture == "p" and tag == "code":
            self._code = []
            return
        if self._capture == "pre" and tag == "code":
            self._language = _language_from_class(a.get("class"))
            return
        if self._capture is not None:
            return

        if tag in ("h1", "time"):
            self._start(tag)
        elif self._article_depth and tag in ("p", "pre"):
            self._language = None
            self._start(tag)

    def handle_endtag(self, tag: str) -> None:
        if tag == "article" and self._article_depth:
            self._article_depth -= 1
            return
        if self._capture == "p" and tag == "code" and self._code is not None:
            self._buf.append(to_code_span("".join(self._code)))
            self._code = None
            return
        if tag != self._capture:
            return

        text = "".join(self._buf)
        if tag == "h1":
            self.page.headings.append(text.strip())
        elif tag == "time":
            self.page.timestamps.append(text.strip())
        elif tag == "p":
            self.page.blocks.append(Paragraph(text))
        elif tag == "pre":
            self.page.blocks.append(CodeSample(text, language=self._language))
        self._capture = None
        self._buf = []

    def handle_data(self, data: str) -> None:
        if self._code is not None:
            self._code.append(data)
        elif self._capture is not None:
            self._buf.append(data)

    def _start(self, tag: str) -> None:
        self._capture = tag
        self._buf = []


def to_code_span(content: str) -> str:
    """Shortest backtick fence that the renderer reads back as exactly `content`."""
    longest = max((len(run) for run in re.findall(r"`+", content)), default=0)
    fence = "`" * (longest + 1)
    if longest and (content[0] == "`" or content[-1] == "`" or content[0] == content[-1] == " "):
        content = f" {content} "
    return f"{fence}{content}{fence}"


def _language_from_class(value: str | None) -> str | None:
    for cls in (value or "").split():
        if cls.startswith(_LANGUAGE_PREFIX):
            return cls[len(_LANGUAGE_PREFIX):] or None
    return None


class PageReader(IPageReader):
    """
    Reads a rendered article page back into its parts.

    Code sample text is returned exactly as authored (entities decoded, whitespace
    untouched). Inline <code> inside paragraphs comes back as `backtick` spans.
    """

    def read(self, html: str) -> RenderedPage:
        parser = _ArticleParser()
        parser.feed(html)
        parser.close()
        page = parser.page
        logger.debug(
            "Read page: %d heading(s), %d timestamp(s), %d block(s)",
            len(page.headings),
            len(page.timestamps),
            len(page.blocks),
        )
        return page

    def to_document(self, html: str) -> Document:
        return self.read(html).to_document()

    def to_plain_text(self, html: str) -> str:
        page = self.read(html)
        parts = [*page.headings, *page.timestamps]
        parts.extend(block.text for block in page.blocks)
        return "\n\n".join(parts) + "\n"
