"""Exceptions raised by the theme engine."""

from typing import Any, Iterable, List, Optional


class ThemeEngineError(Exception):
    """Base exception for theme engine failures."""


class MalformedColorError(ThemeEngineError, ValueError):
    """Raised when a color string cannot be parsed as a hex color."""

    def __init__(self, value: Any, reason: str = ""):
        self.value = value
        self.reason = reason
        message = f"Invalid hex color: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class UnknownPresetError(ThemeEngineError, KeyError):
    """Raised when a theme preset id is not in the catalog."""

    def __init__(self, theme_id: Any, available: Optional[Iterable[str]] = None):
        self.theme_id = theme_id
        self.available = sorted(available) if available else []
        super().__init__(theme_id)

    def __str__(self) -> str:
        message = f"Theme preset '{self.theme_id}' not found"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        return message


class ContrastViolationError(ThemeEngineError):
    """Raised when a derived token set breaks the AA contrast invariant."""

    def __init__(self, failures: List[str]):
        self.failures = failures
        super().__init__("; ".join(failures))
