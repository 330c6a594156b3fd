from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Union
from urllib.parse import urlsplit

from staticdoc.utils.constants import DEFAULT_STYLESHEET_HREF


@dataclass(frozen=True)
class Paragraph:
    """Flowing prose. Backtick-delimited spans render as inline code."""

    text: str


@dataclass(frozen=True)
class CodeSample:
    """Preformatted text kept verbatim, whitespace included."""

    text: str
    language: str | None = None


ContentBlock = Union[Paragraph, CodeSample]


def is_relative_href(href: str) -> bool:
    parts = urlsplit(href)
    if parts.scheme or parts.netloc:
        return False
    return bool(parts.path) and not PurePosixPath(parts.path).is_absolute()


@dataclass(frozen=True)
class Document:
    title: str
    published: str
    blocks: tuple[ContentBlock, ...] = field(default_factory=tuple)
    stylesheet: str = DEFAULT_STYLESHEET_HREF

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise ValueError("Document title must not be empty")
        if not self.published or not self.published.strip():
            raise ValueError("Document publish date must not be empty")
        if not is_relative_href(self.stylesheet):
            raise ValueError(f"Stylesheet reference must be relative: {self.stylesheet!r}")
        if not isinstance(self.blocks, tuple):
            # frozen: bypass __setattr__ to normalise lists
            object.__setattr__(self, "blocks", tuple(self.blocks))
        for block in self.blocks:
            if not isinstance(block, (Paragraph, CodeSample)):
                raise TypeError(f"Unsupported content block: {block!r}")

    def paragraphs(self) -> list[Paragraph]:
        return [b for b in self.blocks if isinstance(b, Paragraph)]

    def code_samples(self) -> list[CodeSample]:
        return [b for b in self.blocks if isinstance(b, CodeSample)]
