"""App constants and utilities."""

from .constants import (
    APP_NAME,
    DEFAULT_STYLESHEET,
    DEFAULT_STYLESHEET_HREF,
    PAGE_FILENAME,
    PAGE_TEMPLATE,
    STYLESHEET_FILENAME,
)

__all__ = [
    "APP_NAME",
    "DEFAULT_STYLESHEET",
    "DEFAULT_STYLESHEET_HREF",
    "PAGE_FILENAME",
    "PAGE_TEMPLATE",
    "STYLESHEET_FILENAME",
]
