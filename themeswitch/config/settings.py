"""Application settings via QSettings."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from PySide6.QtCore import QSettings

from themeswitch.runtime_paths import bundled_catalog_path
from themeswitch.themes.constants import DEFAULT_STORAGE_KEY, DEFAULT_THEME_ID
from themeswitch.themes.models import ThemeConfig

logger = logging.getLogger(__name__)

CATALOG_ENV_VAR = "THEMESWITCH_CATALOG"


class AppSettings:
    """Wraps QSettings for persistent app configuration.

    Also serves as the key/value store the theme manager persists the
    active selection into (``get`` / ``set``).
    """

    def __init__(self, qsettings: QSettings | None = None) -> None:
        self._qs = qsettings if qsettings is not None else QSettings("ThemeSwitch", "ThemeSwitch")

    # -- key/value store --

    def get(self, key: str) -> str | None:
        raw = self._qs.value(key, "", type=str)
        return raw or None

    def set(self, key: str, value: str) -> bool:
        self._qs.setValue(key, value)
        self._qs.sync()
        status = self._qs.status()
        if status != QSettings.Status.NoError:
            logger.warning("settings write failed key=%s status=%s", key, status)
            return False
        return True

    # -- theme --

    @property
    def theme_default_id(self) -> str:
        raw = self._qs.value("theme/default_id", DEFAULT_THEME_ID, type=str)
        value = (raw or "").strip()
        return value or DEFAULT_THEME_ID

    @theme_default_id.setter
    def theme_default_id(self, value: str) -> None:
        cleaned = (value or "").strip() or DEFAULT_THEME_ID
        self._qs.setValue("theme/default_id", cleaned)

    @property
    def theme_storage_key(self) -> str:
        raw = self._qs.value("theme/storage_key", DEFAULT_STORAGE_KEY, type=str)
        value = (raw or "").strip()
        return value or DEFAULT_STORAGE_KEY

    @theme_storage_key.setter
    def theme_storage_key(self, value: str) -> None:
        cleaned = (value or "").strip() or DEFAULT_STORAGE_KEY
        self._qs.setValue("theme/storage_key", cleaned)

    @property
    def theme_config(self) -> ThemeConfig:
        return ThemeConfig(
            default_theme_id=self.theme_default_id,
            storage_key=self.theme_storage_key,
        )

    # -- catalog --

    @property
    def catalog_source(self) -> str:
        override = os.environ.get(CATALOG_ENV_VAR, "").strip()
        if override:
            return override
        raw = self._qs.value("catalog/source", "", type=str)
        value = (raw or "").strip()
        return value or str(bundled_catalog_path())

    @catalog_source.setter
    def catalog_source(self, value: str) -> None:
        self._qs.setValue("catalog/source", (value or "").strip())

    # -- window geometry --

    @property
    def window_geometry(self) -> bytes | None:
        return self._qs.value("ui/window_geometry")

    @window_geometry.setter
    def window_geometry(self, value: bytes) -> None:
        self._qs.setValue("ui/window_geometry", value)

    # -- helpers --

    @property
    def app_data_dir(self) -> Path:
        path = self._app_data_dir()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @staticmethod
    def _app_data_dir() -> Path:
        base = Path(os.environ.get("APPDATA", Path.home() / ".config"))
        return base / "themeswitch"
