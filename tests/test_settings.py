"""Tests for the QSettings-backed settings and key/value store."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import QSettings

from themeswitch.config.settings import CATALOG_ENV_VAR, AppSettings
from themeswitch.runtime_paths import bundled_catalog_path
from themeswitch.themes.constants import DEFAULT_STORAGE_KEY, DEFAULT_THEME_ID
from themeswitch.themes.manager import ThemeManager
from themeswitch.themes.models import ThemeConfig

from helpers import THEME_A, THEME_B, StaticLoader


def test_get_missing_key_returns_none(ini_settings: AppSettings) -> None:
    """Test get returns None for a missing key."""
    assert ini_settings.get("ui/theme_id") is None


def test_set_then_get_round_trip(ini_settings: AppSettings) -> None:
    """Test a stored value reads back."""
    assert ini_settings.set("ui/theme_id", "nord") is True
    assert ini_settings.get("ui/theme_id") == "nord"


def test_empty_value_reads_as_absent(ini_settings: AppSettings) -> None:
    """Test an empty stored value reads as absent."""
    ini_settings.set("ui/theme_id", "")
    assert ini_settings.get("ui/theme_id") is None


def test_value_read_back_verbatim(ini_settings: AppSettings) -> None:
    """Test stored values are returned without trimming."""
    ini_settings.set("ui/theme_id", " nord ")
    assert ini_settings.get("ui/theme_id") == " nord "


def test_values_survive_new_settings_instance(tmp_path: Path) -> None:
    """Test values persist across settings instances."""
    path = str(tmp_path / "settings.ini")
    AppSettings(QSettings(path, QSettings.Format.IniFormat)).set("ui/theme_id", "tokyonight")
    reopened = AppSettings(QSettings(path, QSettings.Format.IniFormat))
    assert reopened.get("ui/theme_id") == "tokyonight"


def test_theme_config_defaults(ini_settings: AppSettings) -> None:
    """Test theme_config defaults to dracula and ui/theme_id."""
    config = ini_settings.theme_config
    assert config == ThemeConfig(default_theme_id=DEFAULT_THEME_ID, storage_key=DEFAULT_STORAGE_KEY)
    assert config.default_theme_id == "dracula"
    assert config.storage_key == "ui/theme_id"


def test_theme_config_overrides(ini_settings: AppSettings) -> None:
    """Test theme_config honours stored overrides."""
    ini_settings.theme_default_id = "nord"
    ini_settings.theme_storage_key = "prefs/theme"
    assert ini_settings.theme_config == ThemeConfig(default_theme_id="nord", storage_key="prefs/theme")

    ini_settings.theme_default_id = "  "
    assert ini_settings.theme_default_id == DEFAULT_THEME_ID


def test_catalog_source_defaults_to_bundled_file(ini_settings: AppSettings, monkeypatch) -> None:
    """Test catalog_source defaults to the bundled catalog."""
    monkeypatch.delenv(CATALOG_ENV_VAR, raising=False)
    assert ini_settings.catalog_source == str(bundled_catalog_path())

    ini_settings.catalog_source = "https://example.com/themes.json"
    assert ini_settings.catalog_source == "https://example.com/themes.json"


def test_catalog_source_env_override(ini_settings: AppSettings, monkeypatch) -> None:
    """Test the environment variable overrides catalog_source."""
    ini_settings.catalog_source = "/srv/themes.json"
    monkeypatch.setenv(CATALOG_ENV_VAR, "https://cdn.example.com/themes.json")
    assert ini_settings.catalog_source == "https://cdn.example.com/themes.json"


def test_manager_persists_through_settings(ini_settings: AppSettings) -> None:
    """Test the manager persists and restores through AppSettings."""
    manager = ThemeManager(
        ini_settings,
        ini_settings.theme_config,
        StaticLoader([THEME_A, THEME_B]),
        threaded=False,
    )
    manager.initialize()
    manager.load_catalog()
    manager.select("b")
    assert ini_settings.get("ui/theme_id") == "b"

    restored = ThemeManager(ini_settings, ThemeConfig(default_theme_id="a"))
    assert restored.initialize() == "b"
