"""Per-theme colour palettes and their registry."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Mapping

from themeswitch.themes.constants import PALETTE_SCHEMA_VERSION, PALETTE_TOKEN_KEYS
from themeswitch.themes.models import PaletteValidationError

_HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")

_MAX_PALETTE_FILE_BYTES = 256 * 1024
_MAX_PALETTES = 1024


def load_palettes(path: Path) -> dict[str, dict[str, str]]:
    """Load and validate a palette file keyed by theme id.

    A palette may list only some tokens; the stylesheet builder fills the rest
    from the base dark or light palette.
    """
    data = _load_json(path)
    unknown = sorted(set(data) - {"schema_version", "palettes"})
    if unknown:
        raise PaletteValidationError(f"{path}: unknown keys: {', '.join(unknown)}")
    schema_version = data.get("schema_version")
    if schema_version != PALETTE_SCHEMA_VERSION:
        raise PaletteValidationError(
            f"{path}: unsupported schema_version {schema_version!r}; "
            f"expected {PALETTE_SCHEMA_VERSION!r}"
        )

    palettes = data.get("palettes")
    if not isinstance(palettes, dict):
        raise PaletteValidationError(f"{path}: 'palettes' must be an object")
    if len(palettes) > _MAX_PALETTES:
        raise PaletteValidationError(f"{path}: {len(palettes)} palettes; limit is {_MAX_PALETTES}")

    parsed: dict[str, dict[str, str]] = {}
    for theme_id, tokens in palettes.items():
        if not theme_id:
            raise PaletteValidationError(f"{path}: palette ids must be non-empty")
        parsed[theme_id] = _parse_tokens(tokens, context=f"{path}: palette {theme_id!r}")
    return parsed


class PaletteRegistry:
    """Holds the palettes available to the stylesheet builder."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path
        self._palettes: dict[str, dict[str, str]] = {}
        self._load_errors: list[str] = []

    @classmethod
    def from_mapping(cls, palettes: Mapping[str, Mapping[str, str]]) -> PaletteRegistry:
        registry = cls()
        registry._palettes = {
            theme_id: _parse_tokens(tokens, context=f"palette {theme_id!r}")
            for theme_id, tokens in palettes.items()
        }
        return registry

    @property
    def path(self) -> Path | None:
        return self._path

    def reload(self) -> None:
        self._palettes = {}
        self._load_errors = []
        if self._path is None:
            return
        try:
            self._palettes = load_palettes(self._path)
        except (OSError, PaletteValidationError) as exc:
            self._load_errors.append(str(exc))

    def theme_ids(self) -> list[str]:
        return list(self._palettes)

    def tokens_for(self, theme_id: str) -> dict[str, str] | None:
        tokens = self._palettes.get(theme_id)
        return dict(tokens) if tokens is not None else None

    def load_errors(self) -> list[str]:
        return list(self._load_errors)


def _parse_tokens(data: object, *, context: str) -> dict[str, str]:
    if not isinstance(data, dict):
        raise PaletteValidationError(f"{context}: expected an object of tokens")
    unknown = sorted(set(data) - set(PALETTE_TOKEN_KEYS))
    if unknown:
        raise PaletteValidationError(f"{context}: unknown token keys: {', '.join(unknown)}")
    tokens: dict[str, str] = {}
    for key in PALETTE_TOKEN_KEYS:
        if key not in data:
            continue
        value = data[key]
        if not isinstance(value, str) or not _HEX_COLOR_RE.match(value.strip()):
            raise PaletteValidationError(f"{context}: token {key!r} has invalid color {value!r}")
        tokens[key] = value.strip()
    return tokens


def _load_json(path: Path) -> Mapping[str, object]:
    size = path.stat().st_size
    if size > _MAX_PALETTE_FILE_BYTES:
        raise PaletteValidationError(f"{path}: exceeds max size ({_MAX_PALETTE_FILE_BYTES} bytes)")
    try:
        data = json.loads(path.read_text(encoding="utf-8-sig"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise PaletteValidationError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise PaletteValidationError(f"Expected JSON object in {path}")
    return data
