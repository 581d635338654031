"""Shared fixtures for ThemeSwitch tests."""

from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from pathlib import Path

import pytest
from PySide6.QtCore import QSettings
from PySide6.QtWidgets import QApplication

from themeswitch.config.settings import AppSettings
from themeswitch.themes.models import CatalogLoadError, Theme, ThemeConfig

from helpers import THEME_A, THEME_B, THEME_C, MemoryStore, StaticLoader


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def themes() -> list[Theme]:
    return [THEME_A, THEME_B, THEME_C]


@pytest.fixture
def config() -> ThemeConfig:
    return ThemeConfig(default_theme_id="a", storage_key="ui/theme_id")


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def failing_loader() -> StaticLoader:
    return StaticLoader(error=CatalogLoadError("catalog: expected a JSON array of themes"))


@pytest.fixture
def ini_settings(tmp_path: Path) -> AppSettings:
    qs = QSettings(str(tmp_path / "settings.ini"), QSettings.Format.IniFormat)
    return AppSettings(qs)
