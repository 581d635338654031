"""Test doubles shared across ThemeSwitch tests."""

from __future__ import annotations

import threading
import time

from themeswitch.themes.models import Theme


class MemoryStore:
    """In-memory key/value store that records writes."""

    def __init__(self, initial: dict[str, str] | None = None, *, fail_writes: bool = False) -> None:
        self.values: dict[str, str] = dict(initial or {})
        self.writes: list[tuple[str, str]] = []
        self.fail_writes = fail_writes

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> bool:
        self.writes.append((key, value))
        if self.fail_writes:
            raise OSError("settings file is read-only")
        self.values[key] = value
        return True


THEME_A = Theme(theme_id="a", display_name="Alpha", is_dark=True)
THEME_B = Theme(theme_id="b", display_name="Bravo", is_dark=False)
THEME_C = Theme(theme_id="c", display_name="Charlie", is_dark=True)


class StaticLoader:
    """Loader double returning a fixed catalog or raising."""

    def __init__(self, themes: list[Theme] | None = None, error: Exception | None = None) -> None:
        self._themes = list(themes or [])
        self._error = error
        self.source = "memory://catalog"
        self.calls = 0

    def fetch_themes(self) -> list[Theme]:
        self.calls += 1
        if self._error is not None:
            raise self._error
        return list(self._themes)


class SlowLoader(StaticLoader):
    """Loader double that blocks for ``delay`` seconds before returning."""

    def __init__(self, themes: list[Theme] | None = None, *, delay: float = 0.5) -> None:
        super().__init__(themes)
        self.delay = delay
        self.started = threading.Event()

    def fetch_themes(self) -> list[Theme]:
        self.started.set()
        time.sleep(self.delay)
        return super().fetch_themes()
