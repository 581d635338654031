from themeswitch.ui.widgets.palette_swatches import PaletteSwatches
from themeswitch.ui.widgets.theme_switcher import ThemeIndicator, ThemeSwitcher

__all__ = [
    "PaletteSwatches",
    "ThemeIndicator",
    "ThemeSwitcher",
]
