"""Theme framework constants."""

from __future__ import annotations

DEFAULT_THEME_ID = "dracula"
DEFAULT_STORAGE_KEY = "ui/theme_id"
DEFAULT_CATALOG_FILE = "themes.json"

# Used for display when no catalog member matches the active selection.
FALLBACK_IS_DARK = True

CATALOG_FIELDS: tuple[str, ...] = (
    "id",
    "displayName",
    "isDark",
)

DEFAULT_PALETTE_FILE = "palettes.json"
PALETTE_SCHEMA_VERSION = "1"

PALETTE_TOKEN_KEYS: tuple[str, ...] = (
    "canvas",
    "surface_0",
    "surface_1",
    "surface_2",
    "line_soft",
    "text_primary",
    "text_muted",
    "text_dim",
    "accent",
    "accent_hover",
    "danger",
    "focus_ring",
)
