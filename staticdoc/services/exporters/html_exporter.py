from __future__ import annotations

import logging
import os
from pathlib import Path

from staticdoc.domain.interfaces import IDocumentRenderer, IExporter, IFileService
from staticdoc.domain.models import Document
from staticdoc.services.stylesheet import resolve_stylesheet, stylesheet_reachable
from staticdoc.utils.constants import DEFAULT_STYLESHEET

logger = logging.getLogger(__name__)


def _is_within(path: Path, root: Path) -> bool:
    return Path(os.path.abspath(path)).is_relative_to(os.path.abspath(root))


class HtmlExporter(IExporter):
    """
    Writes the rendered page. When asked, also drops the default stylesheet where
    the page's relative link points, without replacing one that already exists.
    The stylesheet is only written inside the site root (by default the
    directory above the page's own directory).
    """

    name = "html"
    file_ext = "html"

    def __init__(
        self,
        renderer: IDocumentRenderer,
        files: IFileService,
        *,
        write_stylesheet: bool = True,
        stylesheet_css: str = DEFAULT_STYLESHEET,
        site_root: Path | None = None,
    ) -> None:
        self._renderer = renderer
        self._files = files
        self.write_stylesheet = write_stylesheet
        self._css = stylesheet_css
        self.site_root = site_root

    def export(self, document: Document, out_path: Path) -> None:
        self._files.write_text_atomic(out_path, self._renderer.to_html(document))
        logger.info("Wrote %s", out_path)

        css_path = resolve_stylesheet(out_path, document.stylesheet)
        if self.write_stylesheet and not css_path.exists():
            root = self.site_root or out_path.parent.parent
            if _is_within(css_path, root):
                self._files.write_text_atomic(css_path, self._css)
                logger.info("Wrote stylesheet %s", css_path)
            else:
                logger.warning("Not writing stylesheet %s outside site root %s", css_path, root)

        # missing CSS only degrades presentation
        stylesheet_reachable(out_path, document.stylesheet)
