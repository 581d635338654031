"""Theme picker and indicator widgets."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QComboBox, QFrame, QHBoxLayout, QLabel, QPushButton, QStackedLayout, QWidget,
)

from themeswitch.themes.manager import ThemeManager

DARK_MARKER = "\N{CRESCENT MOON}"
LIGHT_MARKER = "\N{BLACK SUN WITH RAYS}"


def mode_label(is_dark: bool) -> str:
    return f"{DARK_MARKER} Dark" if is_dark else f"{LIGHT_MARKER} Light"


class ThemeSwitcher(QFrame):
    """Previous / combo / next control bound to a ThemeManager."""

    def __init__(
        self,
        manager: ThemeManager,
        show_navigation: bool = True,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("ThemeSwitcher")
        self._manager = manager

        self._stack = QStackedLayout(self)
        self._stack.setContentsMargins(0, 0, 0, 0)

        self._loading_label = QLabel("Loading themes...")
        self._loading_label.setObjectName("StatusMessage")
        self._stack.addWidget(self._loading_label)

        controls = QWidget()
        row = QHBoxLayout(controls)
        row.setContentsMargins(0, 0, 0, 0)
        row.setSpacing(6)

        self._prev_btn = QPushButton("\N{LEFTWARDS ARROW}")
        self._prev_btn.setObjectName("ThemeNavButton")
        self._prev_btn.setAccessibleName("Previous theme")
        self._prev_btn.setToolTip("Previous theme")
        self._prev_btn.clicked.connect(manager.previous)
        self._prev_btn.setVisible(show_navigation)
        row.addWidget(self._prev_btn)

        self._combo = QComboBox()
        self._combo.setAccessibleName("Select theme")
        self._combo.setMinimumContentsLength(18)
        self._combo.activated.connect(self._on_activated)
        row.addWidget(self._combo, 1)

        self._next_btn = QPushButton("\N{RIGHTWARDS ARROW}")
        self._next_btn.setObjectName("ThemeNavButton")
        self._next_btn.setAccessibleName("Next theme")
        self._next_btn.setToolTip("Next theme")
        self._next_btn.clicked.connect(manager.next)
        self._next_btn.setVisible(show_navigation)
        row.addWidget(self._next_btn)

        self._stack.addWidget(controls)

        manager.catalog_loaded.connect(self._populate)
        manager.changed.connect(self._sync_selection)
        self._populate()

    @property
    def is_loading(self) -> bool:
        return self._stack.currentIndex() == 0

    def combo(self) -> QComboBox:
        return self._combo

    def _populate(self, *_args) -> None:
        catalog = self._manager.catalog
        self._combo.blockSignals(True)
        self._combo.clear()
        for theme in catalog:
            marker = DARK_MARKER if theme.is_dark else LIGHT_MARKER
            self._combo.addItem(f"{theme.display_name} {marker}", theme.theme_id)
        self._combo.blockSignals(False)
        self._stack.setCurrentIndex(1 if catalog else 0)
        self._sync_selection()

    def _sync_selection(self, *_args) -> None:
        index = self._combo.findData(self._manager.active_theme_id)
        self._combo.blockSignals(True)
        self._combo.setCurrentIndex(index)
        self._combo.blockSignals(False)

    def _on_activated(self, index: int) -> None:
        theme_id = self._combo.itemData(index)
        if isinstance(theme_id, str) and theme_id:
            self._manager.select(theme_id)


class ThemeIndicator(QFrame):
    """Shows the resolved theme name and mode; hidden when nothing resolves."""

    def __init__(self, manager: ThemeManager, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("ThemeIndicator")
        self._manager = manager

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(10)

        self._name_label = QLabel("")
        self._name_label.setObjectName("ThemeName")
        layout.addWidget(self._name_label)

        self._mode_label = QLabel("")
        self._mode_label.setObjectName("ThemeMode")
        layout.addWidget(self._mode_label)
        layout.addStretch(1)

        manager.changed.connect(self.refresh)
        self.refresh()

    def name_text(self) -> str:
        return self._name_label.text()

    def mode_text(self) -> str:
        return self._mode_label.text()

    def refresh(self, *_args) -> None:
        theme = self._manager.current_resolved()
        if theme is None:
            self._name_label.setText("")
            self._mode_label.setText("")
            self.setHidden(True)
            return
        self._name_label.setText(theme.display_name)
        self._mode_label.setText(mode_label(self._manager.is_dark_mode()))
        self.setHidden(False)
