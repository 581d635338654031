"""Application-wide visual styling for dark and light themes."""

from __future__ import annotations

from typing import Mapping

# Theme tokens are centralized to keep visual decisions consistent.
DARK_TOKENS = {
    "canvas": "#0e1015",
    "surface_0": "#12151c",
    "surface_1": "#171b24",
    "surface_2": "#1d2230",
    "line_soft": "#2a3143",
    "text_primary": "#e6ebf5",
    "text_muted": "#93a0b8",
    "text_dim": "#6f7b92",
    "accent": "#d4a44a",
    "accent_hover": "#e6b962",
    "danger": "#d76868",
    "focus_ring": "#8cb6ff",
}

LIGHT_TOKENS = {
    "canvas": "#f4f5f8",
    "surface_0": "#ffffff",
    "surface_1": "#eef0f4",
    "surface_2": "#e1e5ec",
    "line_soft": "#cfd5df",
    "text_primary": "#1b2030",
    "text_muted": "#4f5a70",
    "text_dim": "#7d879a",
    "accent": "#a8741a",
    "accent_hover": "#8f6214",
    "danger": "#b43c3c",
    "focus_ring": "#3a72d8",
}

FONTS = {
    "body": '"Noto Sans", "Segoe UI Variable Text", "Segoe UI", sans-serif',
    "display": '"Bahnschrift", "Segoe UI Semibold", "Segoe UI", sans-serif',
}

BASE_STYLES = """
QWidget {{
    background-color: {surface_0};
    color: {text_primary};
    font-family: {body};
    font-size: 10pt;
}}

QMainWindow {{
    background-color: {canvas};
}}

QLabel {{
    color: {text_primary};
    background-color: transparent;
}}

#HeaderTitle {{
    color: {accent};
    font-family: {display};
    font-size: 15pt;
    font-weight: 700;
}}

#StatusMessage {{
    color: {text_muted};
    font-size: 9pt;
}}

#StatusMessage[severity="error"] {{
    color: {danger};
}}
"""

CARD_STYLES = """
#Card {{
    background-color: {surface_1};
    border: 1px solid {line_soft};
    border-radius: 10px;
}}

#CardTitle {{
    color: {accent};
    font-family: {display};
    font-size: 11pt;
    font-weight: 600;
}}

#ThemeName {{
    font-weight: 600;
}}

#ThemeMode, #ThemeDetail {{
    color: {text_muted};
}}
"""

FORM_STYLES = """
QComboBox {{
    background-color: {surface_0};
    border: 1px solid {line_soft};
    border-radius: 7px;
    padding: 5px 8px;
    selection-background-color: {surface_2};
    color: {text_primary};
}}

QComboBox:focus {{
    border: 1px solid {focus_ring};
}}

QComboBox::drop-down {{
    border: none;
    width: 20px;
}}

QComboBox QAbstractItemView {{
    background-color: {surface_0};
    border: 1px solid {line_soft};
    selection-background-color: {surface_2};
}}
"""

BUTTON_STYLES = """
QPushButton {{
    background-color: {surface_1};
    color: {text_primary};
    border: 1px solid {line_soft};
    border-radius: 7px;
    padding: 5px 11px;
    min-height: 18px;
    font-family: {display};
    font-weight: 600;
}}

QPushButton:hover {{
    background-color: {surface_2};
}}

QPushButton:pressed {{
    background-color: {surface_0};
}}

QPushButton:focus {{
    border: 1px solid {focus_ring};
}}

QPushButton:disabled {{
    color: {text_dim};
}}

#ThemeNavButton {{
    min-width: 28px;
    padding: 5px 6px;
    color: {accent};
}}

#ThemeNavButton:hover {{
    color: {accent_hover};
}}
"""

APP_STYLESHEET = "\n".join(
    [
        BASE_STYLES,
        CARD_STYLES,
        FORM_STYLES,
        BUTTON_STYLES,
    ]
)


def palette_for(is_dark: bool) -> dict[str, str]:
    """Return the token set for a dark or light theme."""
    return dict(DARK_TOKENS if is_dark else LIGHT_TOKENS)


def resolve_tokens(
    *,
    is_dark: bool = True,
    tokens: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Overlay ``tokens`` on the base dark or light palette; unknown keys are ignored."""
    resolved = palette_for(is_dark)
    for key, value in (tokens or {}).items():
        if key in resolved and isinstance(value, str) and value:
            resolved[key] = value
    return resolved


def build_stylesheet(
    *,
    is_dark: bool = True,
    tokens: Mapping[str, str] | None = None,
) -> str:
    """Build the application stylesheet for a dark or light theme.

    ``tokens`` overrides individual entries of the selected palette.
    """
    return APP_STYLESHEET.format(**resolve_tokens(is_dark=is_dark, tokens=tokens), **FONTS)
