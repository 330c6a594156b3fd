from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Sequence
from pathlib import Path

from staticdoc.content import SLUG, golang_testing_with_interfaces
from staticdoc.di.container import Container
from staticdoc.services.config.app_config import EXPORT_FORMATS
from staticdoc.utils.constants import APP_NAME, PAGE_FILENAME
from staticdoc.utils.log_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=APP_NAME, description="Write the article page to disk.")
    p.add_argument("output_dir", nargs="?", type=Path, help="site root (default: from config)")
    p.add_argument("--format", choices=EXPORT_FORMATS, default=None)
    p.add_argument("--config", type=Path, default=None, help="explicit config.ini")
    p.add_argument(
        "--no-stylesheet",
        action="store_true",
        help="do not write the default styles.css next to the page",
    )
    return p


def page_path(output_dir: Path, file_ext: str) -> Path:
    """<site root>/<slug>/index.<ext>, so '../styles.css' lands in the site root."""
    return output_dir / SLUG / f"{PAGE_FILENAME}.{file_ext}"


def _ensure_qt_app() -> object:
    from PyQt6.QtGui import QGuiApplication

    # headless build: no window is ever shown
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    return QGuiApplication.instance() or QGuiApplication([APP_NAME])


def run_app(argv: Sequence[str]) -> int:
    """
    Composes the services via the DI container and writes the article once.
    argv[0] is the program name, as in sys.argv.
    """
    args = build_parser().parse_args(list(argv[1:]))

    container = Container.default(config_path=args.config)
    cfg = container.config
    setup_logging(cfg.log_level)
    if cfg.loaded_from:
        logger.debug("Using config %s", cfg.loaded_from)

    fmt = args.format or cfg.export_format
    exporter = container.exporters.get(fmt)
    if args.no_stylesheet and hasattr(exporter, "write_stylesheet"):
        exporter.write_stylesheet = False

    # QTextDocument printing needs a GUI application object
    qt_app = _ensure_qt_app() if fmt == "pdf" else None

    document = golang_testing_with_interfaces(stylesheet=cfg.stylesheet)
    out = page_path(args.output_dir or cfg.output_dir, exporter.file_ext)
    try:
        exporter.export(document, out)
    except OSError as e:
        logger.error("Export to %s failed: %s", out, e)
        return 1
    finally:
        del qt_app
    return 0
