"""Tests for themeswitch.ui widgets."""

from __future__ import annotations

import pytest

from themeswitch.themes.manager import ThemeManager
from themeswitch.themes.palettes import PaletteRegistry
from themeswitch.themes.service import THEME_PROPERTY, ThemeService
from themeswitch.ui.main_window import MainWindow
from themeswitch.ui.widgets.palette_swatches import PaletteSwatches
from themeswitch.ui.widgets.theme_switcher import (
    DARK_MARKER,
    LIGHT_MARKER,
    ThemeIndicator,
    ThemeSwitcher,
    mode_label,
)

from helpers import MemoryStore, StaticLoader


@pytest.fixture
def manager(config, themes) -> ThemeManager:
    manager = ThemeManager(MemoryStore(), config, StaticLoader(themes), threaded=False)
    manager.initialize()
    return manager


@pytest.fixture
def service(qapp, manager):
    palettes = PaletteRegistry.from_mapping(
        {"a": {"accent": "#ff0000"}, "c": {"accent": "#00ff00"}}
    )
    service = ThemeService(qapp, manager, palettes)
    service.apply_current()
    yield service
    qapp.setStyleSheet("")
    qapp.setProperty(THEME_PROPERTY, None)


class TestThemeSwitcher:
    """Tests for the previous/combo/next switcher."""

    def test_shows_loading_until_catalog_arrives(self, qapp, manager):
        """Test the switcher shows a loading label until the catalog loads."""
        switcher = ThemeSwitcher(manager)
        assert switcher.is_loading is True
        assert switcher.combo().count() == 0

        manager.load_catalog()
        assert switcher.is_loading is False
        assert switcher.combo().count() == 3
        assert switcher.combo().currentData() == "a"

    def test_items_show_display_name_and_mode(self, qapp, manager):
        """Test combo items show the display name and mode marker."""
        manager.load_catalog()
        switcher = ThemeSwitcher(manager)
        assert switcher.combo().itemText(0).startswith("Alpha ")
        assert switcher.combo().itemText(1).startswith("Bravo ")
        assert switcher.combo().itemText(0).endswith(DARK_MARKER)
        assert switcher.combo().itemText(1).endswith(LIGHT_MARKER)

    def test_combo_activation_selects_theme(self, qapp, manager):
        """Test activating a combo item selects the theme."""
        manager.load_catalog()
        switcher = ThemeSwitcher(manager)
        switcher.combo().activated.emit(2)
        assert manager.active_theme_id == "c"
        assert switcher.combo().currentData() == "c"

    def test_follows_manager_navigation(self, qapp, manager):
        """Test the combo follows manager navigation."""
        manager.load_catalog()
        switcher = ThemeSwitcher(manager)
        manager.previous()
        assert switcher.combo().currentData() == "c"

    def test_navigation_buttons_drive_manager(self, qapp, manager):
        """Test the previous and next buttons cycle themes."""
        manager.load_catalog()
        switcher = ThemeSwitcher(manager)
        switcher._next_btn.click()
        assert manager.active_theme_id == "b"
        switcher._prev_btn.click()
        switcher._prev_btn.click()
        assert manager.active_theme_id == "c"

    def test_navigation_can_be_hidden(self, qapp, manager):
        """Test navigation buttons can be hidden."""
        switcher = ThemeSwitcher(manager, show_navigation=False)
        assert switcher._prev_btn.isHidden()
        assert switcher._next_btn.isHidden()

    def test_unresolved_selection_has_no_current_item(self, qapp, config, themes):
        """Test an unresolved id leaves the combo without a current item."""
        manager = ThemeManager(
            MemoryStore({"ui/theme_id": "gone"}), config, StaticLoader(themes), threaded=False
        )
        manager.initialize()
        manager.load_catalog()
        switcher = ThemeSwitcher(manager)
        assert switcher.combo().currentIndex() == -1


class TestThemeIndicator:
    """Tests for the indicator label."""

    def test_hidden_until_theme_resolves(self, qapp, manager):
        """Test the indicator is hidden until a theme resolves."""
        indicator = ThemeIndicator(manager)
        assert indicator.isHidden() is True

        manager.load_catalog()
        assert indicator.isHidden() is False
        assert indicator.name_text() == "Alpha"
        assert indicator.mode_text() == mode_label(True)

    def test_updates_on_selection(self, qapp, manager):
        """Test the indicator updates on selection."""
        manager.load_catalog()
        indicator = ThemeIndicator(manager)
        manager.select("b")
        assert indicator.name_text() == "Bravo"
        assert indicator.mode_text().endswith("Light")


class TestPaletteSwatches:
    """Tests for the palette swatch grid."""

    def test_swatches_follow_applied_palette(self, qapp, manager, service):
        """Test swatch colours track the applied theme palette."""
        swatches = PaletteSwatches(service)
        manager.load_catalog()
        assert swatches.color_of("accent") == "#ff0000"

        manager.select("c")
        assert swatches.color_of("accent") == "#00ff00"
        assert swatches.color_of("canvas") == service.tokens()["canvas"]

    def test_swatches_show_dark_default_before_catalog(self, qapp, manager, service):
        """Test swatches show base dark tokens while nothing resolves."""
        swatches = PaletteSwatches(service)
        assert swatches.color_of("accent") == service.tokens()["accent"]
        assert swatches.color_of("accent") != "#ff0000"


class TestMainWindow:
    """Tests for the demo main window."""

    def test_status_reports_catalog_outcome(self, qapp, ini_settings, config, themes):
        """Test the status line reports the catalog size."""
        manager = ThemeManager(MemoryStore(), config, StaticLoader(themes), threaded=False)
        manager.initialize()
        window = MainWindow(ini_settings, manager)
        assert window.status_text() == "Loading themes..."
        manager.load_catalog()
        assert window.status_text() == "3 themes available."

    def test_status_reports_failure(self, qapp, ini_settings, config, failing_loader):
        """Test the status line reports a catalog failure."""
        manager = ThemeManager(MemoryStore(), config, failing_loader, threaded=False)
        manager.initialize()
        window = MainWindow(ini_settings, manager)
        manager.load_catalog()
        assert window.status_text() == "Theme catalog is malformed and could not be read."

    def test_close_saves_geometry(self, qapp, ini_settings, manager):
        """Test closing the window saves its geometry."""
        window = MainWindow(ini_settings, manager)
        window.show()
        window.close()
        assert ini_settings.window_geometry

    def test_palette_card_only_with_service(self, qapp, ini_settings, manager, service):
        """Test the palette card is built only when a ThemeService is supplied."""
        assert MainWindow(ini_settings, manager).swatches is None
        window = MainWindow(ini_settings, manager, service)
        assert window.swatches is not None
        manager.load_catalog()
        assert window.swatches.color_of("accent") == "#ff0000"
