"""
Exception hierarchy for the theme engine.

Lookups that may legitimately miss (``ThemeRegistry.find``) return ``None``;
operations that cannot proceed without a theme raise ``ThemeNotFoundError``.
"""

from __future__ import annotations


class ThemeEngineError(Exception):
    """Base class for theme engine errors."""

    def __init__(self, message: str, suggestion: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion


class ThemeNotFoundError(ThemeEngineError, LookupError):
    """Raised when a theme name has no match in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Theme '{name}' not found",
            suggestion="Run 'site-themes list' to see available themes.",
        )
        self.name = name


class DuplicateThemeError(ThemeEngineError):
    """Raised when two registered themes share a name (case-insensitively)."""

    def __init__(self, name: str, count: int) -> None:
        super().__init__(f"Theme name {name} occurs {count} times.")
        self.name = name
        self.count = count


class ConfigError(ThemeEngineError):
    """Raised when the project configuration cannot be read."""


class ConfigPersistenceError(ConfigError):
    """Raised when the project configuration cannot be written."""


class TemplateOrderError(ThemeEngineError):
    """Raised when a template references one that is not registered yet."""

    def __init__(self, template: str, missing: str) -> None:
        super().__init__(
            f"Template '{template}' references '{missing}' before it was registered",
            suggestion="Register the base template first.",
        )
        self.template = template
        self.missing = missing
