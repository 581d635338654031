"""Main application window showing the active theme."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QFrame, QHBoxLayout, QLabel, QMainWindow, QVBoxLayout, QWidget,
)

from themeswitch.errors import ErrorCode, ThemeSwitchError
from themeswitch.ui.widgets.palette_swatches import PaletteSwatches
from themeswitch.ui.widgets.theme_switcher import ThemeIndicator, ThemeSwitcher

if TYPE_CHECKING:
    from themeswitch.config.settings import AppSettings
    from themeswitch.themes.manager import ThemeManager
    from themeswitch.themes.service import ThemeService


class MainWindow(QMainWindow):
    """Header with the theme switcher and a card describing the active theme."""

    def __init__(
        self,
        settings: AppSettings,
        manager: ThemeManager,
        service: ThemeService | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings
        self._manager = manager
        self._service = service
        self._swatches: PaletteSwatches | None = None

        self.setWindowTitle("ThemeSwitch")
        self.setMinimumSize(520, 320)
        self.resize(760, 460)
        self.setObjectName("MainWindow")

        self._setup_layout()
        self._setup_actions()
        self._restore_state()

        manager.changed.connect(self._refresh_details)
        manager.catalog_failed.connect(self._on_catalog_failed)
        manager.catalog_loaded.connect(self._on_catalog_loaded)
        self._refresh_details()

    def _setup_layout(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)

        outer = QVBoxLayout(central)
        outer.setContentsMargins(18, 14, 18, 14)
        outer.setSpacing(14)

        header = QHBoxLayout()
        header.setSpacing(12)
        title = QLabel("ThemeSwitch")
        title.setObjectName("HeaderTitle")
        header.addWidget(title)
        header.addStretch(1)
        self._switcher = ThemeSwitcher(self._manager)
        header.addWidget(self._switcher)
        outer.addLayout(header)

        card = QFrame()
        card.setObjectName("Card")
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(16, 12, 16, 12)
        card_layout.setSpacing(8)

        card_title = QLabel("Current Theme")
        card_title.setObjectName("CardTitle")
        card_layout.addWidget(card_title)

        self._indicator = ThemeIndicator(self._manager)
        card_layout.addWidget(self._indicator)

        self._id_label = QLabel("")
        self._id_label.setObjectName("ThemeDetail")
        card_layout.addWidget(self._id_label)

        self._mode_label = QLabel("")
        self._mode_label.setObjectName("ThemeDetail")
        card_layout.addWidget(self._mode_label)

        if self._service is not None:
            palette_title = QLabel("Color Palette")
            palette_title.setObjectName("CardTitle")
            card_layout.addWidget(palette_title)
            self._swatches = PaletteSwatches(self._service)
            card_layout.addWidget(self._swatches)
        card_layout.addStretch(1)

        outer.addWidget(card, 1)

        self._status_label = QLabel("Loading themes...")
        self._status_label.setObjectName("StatusMessage")
        self._status_label.setWordWrap(True)
        outer.addWidget(self._status_label)

    def _setup_actions(self) -> None:
        next_action = QAction("Next Theme", self)
        next_action.setShortcut(QKeySequence("Ctrl+]"))
        next_action.triggered.connect(self._manager.next)
        self.addAction(next_action)

        prev_action = QAction("Previous Theme", self)
        prev_action.setShortcut(QKeySequence("Ctrl+["))
        prev_action.triggered.connect(self._manager.previous)
        self.addAction(prev_action)

    def _refresh_details(self, *_args) -> None:
        theme = self._manager.current_resolved()
        if theme is None:
            self._id_label.setText(f"ID: {self._manager.active_theme_id} (not in catalog)")
        else:
            self._id_label.setText(f"ID: {theme.theme_id}")
        mode = "Dark" if self._manager.is_dark_mode() else "Light"
        self._mode_label.setText(f"Mode: {mode}")

    def _on_catalog_loaded(self, count: int) -> None:
        self._set_status(f"{count} themes available.", severity="")

    def _on_catalog_failed(self, message: str) -> None:
        summary = ThemeSwitchError(ErrorCode.CATALOG_UNAVAILABLE).message
        self._set_status(message.splitlines()[0] if message else summary, severity="error")

    def _set_status(self, text: str, *, severity: str) -> None:
        self._status_label.setText(text)
        self._status_label.setProperty("severity", severity)
        self._status_label.style().unpolish(self._status_label)
        self._status_label.style().polish(self._status_label)

    def status_text(self) -> str:
        return self._status_label.text()

    @property
    def swatches(self) -> PaletteSwatches | None:
        return self._swatches

    def _restore_state(self) -> None:
        geometry = self._settings.window_geometry
        if geometry:
            self.restoreGeometry(geometry)

    def closeEvent(self, event) -> None:
        self._manager.shutdown()
        self._settings.window_geometry = self.saveGeometry()
        super().closeEvent(event)
