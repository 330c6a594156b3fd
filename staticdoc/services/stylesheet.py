from __future__ import annotations

import logging
import os
from pathlib import Path
from urllib.parse import unquote, urlsplit

from staticdoc.domain.models import is_relative_href

logger = logging.getLogger(__name__)


def resolve_stylesheet(document_path: Path, href: str) -> Path:
    """
    Resolve a relative stylesheet href against the directory holding the document.

    '..' segments are collapsed lexically (no symlink resolution), the way a
    static file server maps the URL.
    """
    if not is_relative_href(href):
        raise ValueError(f"Stylesheet reference must be relative: {href!r}")
    rel = unquote(urlsplit(href).path)
    return Path(os.path.normpath(document_path.parent / rel))


def stylesheet_reachable(document_path: Path, href: str) -> bool:
    target = resolve_stylesheet(document_path, href)
    ok = target.is_file()
    if not ok:
        logger.warning("Stylesheet %s not found for %s", target, document_path)
    return ok
