"""Theme catalog and selection exports."""

from themeswitch.themes.constants import DEFAULT_STORAGE_KEY, DEFAULT_THEME_ID
from themeswitch.themes.loader import CatalogLoader, parse_catalog
from themeswitch.themes.manager import ThemeManager
from themeswitch.themes.models import CatalogLoadError, PaletteValidationError, Theme, ThemeConfig
from themeswitch.themes.palettes import PaletteRegistry, load_palettes
from themeswitch.themes.service import ThemeService

__all__ = [
    "DEFAULT_STORAGE_KEY",
    "DEFAULT_THEME_ID",
    "CatalogLoader",
    "CatalogLoadError",
    "PaletteRegistry",
    "PaletteValidationError",
    "Theme",
    "ThemeConfig",
    "ThemeManager",
    "ThemeService",
    "load_palettes",
    "parse_catalog",
]
