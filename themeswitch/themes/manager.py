"""Active theme state: catalog, selection, persistence and change signals."""

from __future__ import annotations

import logging
from typing import Protocol

from PySide6.QtCore import QObject, QThread, Signal

from themeswitch.errors import ErrorCode, ThemeSwitchError
from themeswitch.themes.constants import FALLBACK_IS_DARK
from themeswitch.themes.loader import ThemeSource
from themeswitch.themes.models import Theme, ThemeConfig
from themeswitch.workers.catalog_worker import CatalogWorker

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Persistence medium for the active theme id."""

    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> object:
        ...


class ThemeManager(QObject):
    """Owns the theme catalog and the active selection.

    Every successful mutation updates memory, persists the new id, then emits
    ``changed``, in that order. The active id may name a theme that is not in
    the catalog (not loaded yet, or stale); ``current_resolved`` is ``None``
    in that case and ``is_dark_mode`` falls back to dark.
    """

    changed = Signal(str)
    catalog_loaded = Signal(int)
    catalog_failed = Signal(str)

    def __init__(
        self,
        store: KeyValueStore,
        config: ThemeConfig | None = None,
        loader: ThemeSource | None = None,
        *,
        threaded: bool = True,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._store = store
        self._config = config or ThemeConfig()
        self._loader = loader
        self._threaded = threaded
        self._catalog: tuple[Theme, ...] = ()
        self._catalog_loaded = False
        self._last_catalog_error = ""
        self._active_theme_id = self._config.default_theme_id
        self._jobs: list[tuple[CatalogWorker, QThread]] = []

    # -- read access --

    @property
    def config(self) -> ThemeConfig:
        return self._config

    @property
    def catalog(self) -> tuple[Theme, ...]:
        return self._catalog

    @property
    def active_theme_id(self) -> str:
        return self._active_theme_id

    @property
    def is_catalog_loaded(self) -> bool:
        return self._catalog_loaded

    @property
    def is_loading(self) -> bool:
        return bool(self._jobs)

    @property
    def last_catalog_error(self) -> str:
        return self._last_catalog_error

    def current_resolved(self) -> Theme | None:
        return self._find(self._active_theme_id)

    def is_dark_mode(self) -> bool:
        theme = self.current_resolved()
        if theme is None:
            return FALLBACK_IS_DARK
        return theme.is_dark

    # -- lifecycle --

    def initialize(self) -> str:
        """Restore the persisted selection, falling back to the configured default.

        Nothing is written back: the store only changes on an explicit mutation.
        """
        stored: object = None
        try:
            stored = self._store.get(self._config.storage_key)
        except Exception as exc:
            error = ThemeSwitchError(
                ErrorCode.SETTINGS_READ_FAILED,
                details={"key": self._config.storage_key, "original": exc},
            )
            logger.warning("could not read stored theme: %s", error)
        if isinstance(stored, str) and stored:
            self._active_theme_id = stored
        else:
            self._active_theme_id = self._config.default_theme_id
        logger.debug("theme selection initialized active=%s", self._active_theme_id)
        return self._active_theme_id

    def load_catalog(self) -> None:
        """Fetch the catalog; results arrive later through the manager's signals."""
        if self._loader is None:
            self._on_catalog_failed("No theme catalog source configured.")
            return

        worker = CatalogWorker(self._loader)
        worker.finished.connect(self._on_catalog_fetched)
        worker.error.connect(self._on_catalog_failed)
        if not self._threaded:
            worker.run()
            worker.deleteLater()
            return

        thread = QThread()
        worker.moveToThread(thread)
        thread.started.connect(worker.run)
        worker.finished.connect(thread.quit)
        worker.error.connect(thread.quit)
        thread.finished.connect(self._reap_finished_jobs)
        self._jobs.append((worker, thread))
        thread.start()

    def shutdown(self) -> None:
        """Stop in-flight catalog fetches, blocking until each thread exits.

        A blocked fetch is bounded by the loader timeout.
        """
        for worker, thread in list(self._jobs):
            if thread.isRunning():
                logger.info("waiting for in-flight catalog fetch")
                thread.quit()
                thread.wait()
            self._cleanup_job(worker, thread)

    # -- mutations --

    def select(self, theme_id: str) -> bool:
        """Activate ``theme_id`` if the catalog has it; unknown ids are ignored."""
        if self._find(theme_id) is None:
            logger.debug(
                "ignoring selection: %s",
                ThemeSwitchError(ErrorCode.THEME_UNKNOWN, details={"theme_id": theme_id}),
            )
            return False
        self._activate(theme_id)
        return True

    def next(self) -> bool:
        if not self._catalog:
            return False
        index = self._index_of(self._active_theme_id)
        # Not found behaves like "before the first element".
        start = -1 if index is None else index
        target = self._catalog[(start + 1) % len(self._catalog)]
        self._activate(target.theme_id)
        return True

    def previous(self) -> bool:
        if not self._catalog:
            return False
        index = self._index_of(self._active_theme_id)
        # Not found wraps to the last element.
        start = 0 if index is None else index
        length = len(self._catalog)
        target = self._catalog[(start - 1 + length) % length]
        self._activate(target.theme_id)
        return True

    # -- internals --

    def _activate(self, theme_id: str) -> None:
        self._active_theme_id = theme_id
        self._persist(theme_id)
        self.changed.emit(theme_id)

    def _persist(self, theme_id: str) -> None:
        key = self._config.storage_key
        try:
            result = self._store.set(key, theme_id)
        except Exception as exc:
            error = ThemeSwitchError(
                ErrorCode.SETTINGS_WRITE_FAILED,
                details={"key": key, "theme_id": theme_id, "original": exc},
            )
            logger.warning("could not persist theme: %s", error)
            return
        if result is False:
            error = ThemeSwitchError(
                ErrorCode.SETTINGS_WRITE_FAILED,
                details={"key": key, "theme_id": theme_id},
            )
            logger.warning("theme selection not persisted: %s", error)

    def _find(self, theme_id: str) -> Theme | None:
        for theme in self._catalog:
            if theme.theme_id == theme_id:
                return theme
        return None

    def _index_of(self, theme_id: str) -> int | None:
        for index, theme in enumerate(self._catalog):
            if theme.theme_id == theme_id:
                return index
        return None

    def _on_catalog_fetched(self, themes: object) -> None:
        self._catalog = tuple(themes or ())
        self._catalog_loaded = True
        self._last_catalog_error = ""
        logger.info(
            "theme catalog loaded count=%d active=%s resolved=%s",
            len(self._catalog),
            self._active_theme_id,
            self.current_resolved() is not None,
        )
        self.catalog_loaded.emit(len(self._catalog))
        self.changed.emit(self._active_theme_id)

    def _on_catalog_failed(self, message: str) -> None:
        self._last_catalog_error = message
        logger.warning("theme catalog load failed: %s", message)
        self.catalog_failed.emit(message)

    def _reap_finished_jobs(self) -> None:
        for worker, thread in list(self._jobs):
            if thread.isFinished():
                self._cleanup_job(worker, thread)

    def _cleanup_job(self, worker: CatalogWorker, thread: QThread) -> None:
        try:
            self._jobs.remove((worker, thread))
        except ValueError:
            return
        worker.deleteLater()
        thread.deleteLater()
