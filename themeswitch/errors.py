"""Error codes and error handling utilities for ThemeSwitch."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for ThemeSwitch operations."""

    # Catalog errors
    CATALOG_TIMEOUT = auto()
    CATALOG_UNAVAILABLE = auto()
    CATALOG_NOT_FOUND = auto()
    CATALOG_INVALID = auto()
    CATALOG_TOO_LARGE = auto()

    # Selection errors
    THEME_UNKNOWN = auto()

    # Settings errors
    SETTINGS_WRITE_FAILED = auto()
    SETTINGS_READ_FAILED = auto()

    # Operation errors
    OPERATION_FAILED = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.CATALOG_TIMEOUT: "Theme catalog request timed out. Check your internet connection.",
    ErrorCode.CATALOG_UNAVAILABLE: "Theme catalog is unavailable. Check your connection or catalog source.",
    ErrorCode.CATALOG_NOT_FOUND: "Theme catalog was not found at the configured source.",
    ErrorCode.CATALOG_INVALID: "Theme catalog is malformed and could not be read.",
    ErrorCode.CATALOG_TOO_LARGE: "Theme catalog exceeds the maximum supported size.",

    ErrorCode.THEME_UNKNOWN: "The requested theme is not in the loaded catalog.",

    ErrorCode.SETTINGS_WRITE_FAILED: "Theme selection could not be saved. It will reset next launch.",
    ErrorCode.SETTINGS_READ_FAILED: "Saved theme selection could not be read. Using the default theme.",

    ErrorCode.OPERATION_FAILED: "Operation failed. See details for more information.",
}


@dataclass
class ThemeSwitchError(Exception):
    """Base exception for ThemeSwitch with error code and context."""

    code: ErrorCode
    message: str = ""
    source: str | None = None
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")
        if not self.suggestion and self.code in ERROR_MESSAGES:
            self.suggestion = ERROR_MESSAGES[self.code]

    def __str__(self) -> str:
        parts = [self.message]
        if self.source:
            parts.append(f"\nSource: {self.source}")
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or UI display."""
        return {
            "code": self.code.name,
            "message": self.message,
            "source": self.source,
            "details": self.details,
            "suggestion": self.suggestion,
        }


def classify_exception(exc: Exception, source: str | None = None) -> ThemeSwitchError:
    """Classify a generic exception into a ThemeSwitchError with appropriate code."""
    if isinstance(exc, ThemeSwitchError):
        return exc

    # themeswitch.themes imports this module through the catalog worker.
    from themeswitch.themes.models import CatalogLoadError, CatalogTooLargeError

    exc_name = type(exc).__name__
    exc_str = str(exc).lower()

    if isinstance(exc, CatalogTooLargeError):
        return ThemeSwitchError(ErrorCode.CATALOG_TOO_LARGE, source=source, details={"original": exc_str})
    if isinstance(exc, CatalogLoadError):
        return ThemeSwitchError(ErrorCode.CATALOG_INVALID, source=source, details={"original": exc_str})

    if "timeout" in exc_str or "timed out" in exc_str or "TimeoutError" in exc_name:
        return ThemeSwitchError(ErrorCode.CATALOG_TIMEOUT, source=source, details={"original": exc_str})
    if "FileNotFoundError" in exc_name or "no such file" in exc_str:
        return ThemeSwitchError(ErrorCode.CATALOG_NOT_FOUND, source=source, details={"original": exc_str})
    if "404" in exc_str or "not found" in exc_str:
        return ThemeSwitchError(ErrorCode.CATALOG_NOT_FOUND, source=source, details={"original": exc_str})
    if "JSONDecodeError" in exc_name or "UnicodeDecodeError" in exc_name:
        return ThemeSwitchError(ErrorCode.CATALOG_INVALID, source=source, details={"original": exc_str})
    if (
        "URLError" in exc_name
        or "network" in exc_str
        or "connection" in exc_str
        or "unreachable" in exc_str
        or "name or service not known" in exc_str
    ):
        return ThemeSwitchError(ErrorCode.CATALOG_UNAVAILABLE, source=source, details={"original": exc_str})

    return ThemeSwitchError(
        ErrorCode.OPERATION_FAILED,
        message=f"{exc_name}: {exc}",
        source=source,
        details={"original": exc_str},
    )


def format_error_for_user(error: ThemeSwitchError | Exception) -> str:
    """Format an error for display to the user with actionable suggestions."""
    if isinstance(error, ThemeSwitchError):
        parts = [error.message]
        if error.suggestion and error.suggestion != error.message:
            parts.append(f"\n\n{error.suggestion}")
        if error.source:
            parts.append(f"\n\nSource: {error.source}")
        return "".join(parts)

    classified = classify_exception(error)
    return format_error_for_user(classified)
