"""Colour swatches for the applied theme palette."""

from __future__ import annotations

from PySide6.QtWidgets import QFrame, QGridLayout, QLabel, QWidget

from themeswitch.themes.service import ThemeService

SWATCH_TOKENS: tuple[tuple[str, str], ...] = (
    ("canvas", "Canvas"),
    ("surface_1", "Surface"),
    ("text_primary", "Text"),
    ("accent", "Accent"),
    ("danger", "Danger"),
    ("focus_ring", "Focus"),
)


class PaletteSwatches(QFrame):
    """Grid of labelled colour chips following ThemeService.theme_applied."""

    def __init__(self, service: ThemeService, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("PaletteSwatches")
        self._service = service
        self._chips: dict[str, QLabel] = {}

        grid = QGridLayout(self)
        grid.setContentsMargins(0, 0, 0, 0)
        grid.setHorizontalSpacing(10)
        grid.setVerticalSpacing(4)
        for column, (token, label) in enumerate(SWATCH_TOKENS):
            chip = QLabel()
            chip.setObjectName("PaletteChip")
            chip.setFixedSize(36, 22)
            grid.addWidget(chip, 0, column)
            caption = QLabel(label)
            caption.setObjectName("ThemeDetail")
            grid.addWidget(caption, 1, column)
            self._chips[token] = chip

        service.theme_applied.connect(self.refresh)
        self.refresh()

    def color_of(self, token: str) -> str:
        return self._chips[token].property("color") or ""

    def refresh(self, *_args) -> None:
        tokens = self._service.tokens()
        for token, chip in self._chips.items():
            color = tokens.get(token, "")
            chip.setProperty("color", color)
            chip.setToolTip(f"{token}: {color}" if color else token)
            chip.setStyleSheet(
                f"background-color: {color}; border-radius: 4px;" if color else ""
            )
