from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from staticdoc.domain.interfaces import IConfigService
from staticdoc.domain.models import is_relative_href
from staticdoc.services.config.ini_config_service import IniConfigService
from staticdoc.utils.constants import DEFAULT_STYLESHEET_HREF

EXPORT_FORMATS = ("html", "text", "pdf")


def _project_root_fallback() -> Path:
    # app_config.py -> staticdoc/services/config/app_config.py
    return Path(__file__).resolve().parents[3]


@dataclass(frozen=True)
class AppConfig:
    """
    Typed view over the INI settings, with the defaults applied.

    Values that do not parse (or a stylesheet href that is not relative) fall
    back to the defaults rather than failing the build.
    """

    ini: IConfigService

    @property
    def stylesheet(self) -> str:
        href = (self.ini.get("render", "stylesheet") or "").strip()
        return href if href and is_relative_href(href) else DEFAULT_STYLESHEET_HREF

    @property
    def lang(self) -> str:
        return (self.ini.get("render", "lang") or "").strip() or "en"

    @property
    def output_dir(self) -> Path:
        return Path((self.ini.get("export", "output_dir") or "").strip() or "site")

    @property
    def export_format(self) -> str:
        fmt = (self.ini.get("export", "format") or "").strip().lower()
        return fmt if fmt in EXPORT_FORMATS else "html"

    @property
    def write_stylesheet(self) -> bool:
        return bool(self.ini.get_bool("export", "write_stylesheet", True))

    @property
    def pdf_margin_mm(self) -> float:
        v = self.ini.get_float("pdf", "margin_mm", 12.7)
        return v if v is not None and v >= 0 else 12.7

    @property
    def log_level(self) -> str:
        return (self.ini.get("logging", "level") or "").strip() or "INFO"

    def as_dict(self) -> Mapping[str, Mapping[str, str]]:
        return self.ini.as_dict()

    @property
    def loaded_from(self) -> Path | None:
        return getattr(self.ini, "loaded_from", None)


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root_fallback()
    return AppConfig(ini=IniConfigService(explicit_path=explicit_ini, project_root=root))
