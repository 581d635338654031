"""QApplication bootstrap."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
import sys

from PySide6.QtWidgets import QApplication

from themeswitch.config.settings import AppSettings
from themeswitch.runtime_paths import bundled_palettes_path, is_frozen, package_root
from themeswitch.themes.loader import CatalogLoader
from themeswitch.themes.manager import ThemeManager
from themeswitch.themes.palettes import PaletteRegistry
from themeswitch.themes.service import ThemeService
from themeswitch.ui.main_window import MainWindow


def _configure_logger(settings: AppSettings) -> logging.Logger:
    logger = logging.getLogger("themeswitch")
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    log_dir = settings.app_data_dir / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / "startup.log",
        maxBytes=512_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def run_app() -> int:
    """Initialize and run the application."""
    app = QApplication(sys.argv)
    app.setStyle("Fusion")
    app.setApplicationName("ThemeSwitch")
    app.setOrganizationName("ThemeSwitch")
    settings = AppSettings()
    logger = _configure_logger(settings)
    logger.info("startup mode frozen=%s package_root=%s", is_frozen(), package_root())

    catalog_source = settings.catalog_source
    logger.info("theme catalog source=%s", catalog_source)
    manager = ThemeManager(
        settings,
        settings.theme_config,
        CatalogLoader(catalog_source),
    )
    manager.initialize()

    palettes = PaletteRegistry(bundled_palettes_path())
    palettes.reload()
    for error in palettes.load_errors():
        logger.warning("palette load error: %s", error)

    # Style the surface before the catalog arrives; nothing resolves yet so
    # this renders the dark default.
    theme_service = ThemeService(app, manager, palettes)
    theme_service.apply_current()

    window = MainWindow(settings, manager, theme_service)
    window.show()
    app.aboutToQuit.connect(manager.shutdown)
    manager.load_catalog()

    exit_code = app.exec()
    return exit_code
