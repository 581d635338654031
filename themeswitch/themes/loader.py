"""Theme catalog fetching and parsing."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Protocol
from urllib.parse import unquote, urlparse
from urllib.request import Request, urlopen

from themeswitch import __version__
from themeswitch.themes.models import CatalogLoadError, CatalogTooLargeError, Theme

_MAX_CATALOG_BYTES = 1024 * 1024
_MAX_CATALOG_ENTRIES = 1024
_DEFAULT_TIMEOUT = 12.0


class ThemeSource(Protocol):
    """Anything that can produce an ordered list of themes."""

    def fetch_themes(self) -> list[Theme]:
        ...


class CatalogLoader:
    """Reads a theme catalog from a local file or an http(s) URL."""

    def __init__(self, source: str | Path, *, timeout: float = _DEFAULT_TIMEOUT) -> None:
        self._source = str(source)
        self._timeout = timeout

    @property
    def source(self) -> str:
        return self._source

    def fetch_themes(self) -> list[Theme]:
        raw = self._read_bytes()
        try:
            content = raw.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise CatalogLoadError(f"{self._source}: catalog is not valid UTF-8: {exc}") from exc
        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            raise CatalogLoadError(f"Invalid JSON in {self._source}: {exc}") from exc
        return parse_catalog(data, context=self._source)

    def _read_bytes(self) -> bytes:
        parsed = urlparse(self._source)
        if parsed.scheme in {"http", "https"}:
            return self._read_url()
        if parsed.scheme == "file":
            return _read_file_limited(Path(unquote(parsed.path)))
        return _read_file_limited(Path(self._source).expanduser())

    def _read_url(self) -> bytes:
        req = Request(
            self._source,
            headers={
                "User-Agent": f"ThemeSwitch/{__version__}",
                "Accept": "application/json",
            },
        )
        with urlopen(req, timeout=self._timeout) as resp:
            data = resp.read(_MAX_CATALOG_BYTES + 1)
        if len(data) > _MAX_CATALOG_BYTES:
            raise CatalogTooLargeError(
                f"{self._source}: catalog exceeds max size ({_MAX_CATALOG_BYTES} bytes)"
            )
        return data


def parse_catalog(data: object, *, context: str = "catalog") -> list[Theme]:
    """Convert decoded catalog JSON into an ordered list of themes."""
    if not isinstance(data, list):
        raise CatalogLoadError(f"{context}: expected a JSON array of themes")
    if len(data) > _MAX_CATALOG_ENTRIES:
        raise CatalogTooLargeError(
            f"{context}: catalog has {len(data)} entries; limit is {_MAX_CATALOG_ENTRIES}"
        )

    themes: list[Theme] = []
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise CatalogLoadError(f"{context}: entry {index} must be an object")
        theme_id = record.get("id")
        if not isinstance(theme_id, str) or not theme_id:
            raise CatalogLoadError(f"{context}: entry {index} field 'id' must be a non-empty string")
        display_name = record.get("displayName")
        if not isinstance(display_name, str):
            raise CatalogLoadError(
                f"{context}: entry {index} field 'displayName' must be a string"
            )
        is_dark = record.get("isDark")
        if not isinstance(is_dark, bool):
            raise CatalogLoadError(f"{context}: entry {index} field 'isDark' must be a boolean")
        themes.append(
            Theme(
                theme_id=theme_id,
                display_name=display_name.strip() or theme_id,
                is_dark=is_dark,
            )
        )
    return themes


def _read_file_limited(path: Path) -> bytes:
    # OSError (missing file, permissions) propagates for classification.
    size = path.stat().st_size
    if size > _MAX_CATALOG_BYTES:
        raise CatalogTooLargeError(f"{path}: catalog exceeds max size ({_MAX_CATALOG_BYTES} bytes)")
    return path.read_bytes()
