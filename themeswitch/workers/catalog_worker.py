"""Worker for fetching the theme catalog."""

from __future__ import annotations

from themeswitch.errors import classify_exception
from themeswitch.themes.loader import ThemeSource
from themeswitch.workers.base_worker import BaseWorker


class CatalogWorker(BaseWorker):
    """Fetches and parses the theme catalog in a background thread."""

    def __init__(self, loader: ThemeSource) -> None:
        super().__init__()
        self._loader = loader

    def run(self) -> None:
        self.started.emit()
        try:
            themes = list(self._loader.fetch_themes())
        except Exception as e:
            source = getattr(self._loader, "source", None)
            self.error.emit(str(classify_exception(e, source=source)))
            return
        self.finished.emit(themes)
