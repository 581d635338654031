"""Theme framework models."""

from __future__ import annotations

from dataclasses import dataclass

from themeswitch.themes.constants import DEFAULT_STORAGE_KEY, DEFAULT_THEME_ID


class CatalogLoadError(ValueError):
    """Raised when a theme catalog cannot be read or parsed."""


class CatalogTooLargeError(CatalogLoadError):
    """Raised when a catalog payload exceeds the size limit."""


@dataclass(frozen=True, slots=True)
class Theme:
    """A catalog entry: identity, label and light/dark flag."""

    theme_id: str
    display_name: str
    is_dark: bool


@dataclass(frozen=True, slots=True)
class ThemeConfig:
    """Construction-time configuration for the theme manager."""

    default_theme_id: str = DEFAULT_THEME_ID
    storage_key: str = DEFAULT_STORAGE_KEY


class PaletteValidationError(ValueError):
    """Raised when a palette file fails validation."""
