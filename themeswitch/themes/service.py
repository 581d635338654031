"""Runtime theme application to the running QApplication."""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal
from PySide6.QtWidgets import QApplication

from themeswitch.themes.compiler import compile_theme_stylesheet, theme_tokens
from themeswitch.themes.manager import ThemeManager
from themeswitch.themes.palettes import PaletteRegistry

THEME_PROPERTY = "theme"

logger = logging.getLogger(__name__)


class ThemeService(QObject):
    """Apply the manager's active theme to QApplication.

    The resolved theme's palette drives the stylesheet; a theme without a
    palette uses the base dark or light tokens, and an unresolved selection
    renders the dark default. The active id is also published as the
    ``theme`` dynamic property on the application.
    """

    theme_applied = Signal(str)

    def __init__(
        self,
        app: QApplication,
        manager: ThemeManager,
        palettes: PaletteRegistry | None = None,
    ) -> None:
        super().__init__()
        self._app = app
        self._manager = manager
        self._palettes = palettes
        self._applied_theme_id = ""
        self._applied_tokens: dict[str, str] = {}
        self._applied_stylesheet = ""
        manager.changed.connect(self._on_theme_changed)

    @property
    def applied_theme_id(self) -> str:
        return self._applied_theme_id

    @property
    def palettes(self) -> PaletteRegistry | None:
        return self._palettes

    def tokens(self) -> dict[str, str]:
        """Return the token set of the last applied theme."""
        return dict(self._applied_tokens)

    def apply_current(self) -> str:
        theme_id = self._manager.active_theme_id
        theme = self._manager.current_resolved()
        self._app.setProperty(THEME_PROPERTY, theme_id)
        stylesheet = compile_theme_stylesheet(theme, self._palettes)
        # Setting the stylesheet restyles every widget; skip when unchanged.
        if stylesheet != self._applied_stylesheet:
            self._app.setStyleSheet(stylesheet)
            self._applied_stylesheet = stylesheet
            logger.debug("stylesheet applied theme=%s resolved=%s", theme_id, theme is not None)
        self._applied_tokens = theme_tokens(theme, self._palettes)
        self._applied_theme_id = theme_id
        self.theme_applied.emit(theme_id)
        return theme_id

    def _on_theme_changed(self, _theme_id: str) -> None:
        self.apply_current()
