"""Theme compilation helpers."""

from __future__ import annotations

from themeswitch.themes.constants import FALLBACK_IS_DARK
from themeswitch.themes.models import Theme
from themeswitch.themes.palettes import PaletteRegistry
from themeswitch.ui.theme import build_stylesheet, resolve_tokens


def theme_tokens(theme: Theme | None, palettes: PaletteRegistry | None = None) -> dict[str, str]:
    """Return the full token set for ``theme``; ``None`` gets the dark default."""
    if theme is None:
        return resolve_tokens(is_dark=FALLBACK_IS_DARK)
    overrides = palettes.tokens_for(theme.theme_id) if palettes is not None else None
    return resolve_tokens(is_dark=theme.is_dark, tokens=overrides)


def compile_theme_stylesheet(theme: Theme | None, palettes: PaletteRegistry | None = None) -> str:
    """Compile a catalog theme and its palette into an application stylesheet."""
    is_dark = FALLBACK_IS_DARK if theme is None else theme.is_dark
    return build_stylesheet(is_dark=is_dark, tokens=theme_tokens(theme, palettes))
