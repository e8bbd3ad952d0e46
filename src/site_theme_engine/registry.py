"""
Built-in theme catalog and lookup.

The catalog is a closed table of theme classes. Every enumeration builds
fresh instances, so there is no shared mutable state to guard.

Example:
    from site_theme_engine.registry import get_all_themes, get_theme

    for theme in get_all_themes():
        print(theme.info().name)

    theme = get_theme("obsidian")  # case-insensitive, None if missing
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Sequence

from site_theme_engine.errors import DuplicateThemeError
from site_theme_engine.logging import get_logger
from site_theme_engine.themes import (
    BrutjaTheme,
    DarkMinimalTheme,
    MinimalRetroTheme,
    MusashiTheme,
    ObsidianTheme,
    SlatePortfolioTheme,
    TerminalCandyTheme,
    Theme,
    TypewriterTheme,
)

logger = get_logger("registry")

ThemeFactory = Callable[[], Theme]

# Display order for listings.
BUILTIN_THEMES: tuple[ThemeFactory, ...] = (
    MinimalRetroTheme,
    ObsidianTheme,
    TerminalCandyTheme,
    DarkMinimalTheme,
    MusashiTheme,
    SlatePortfolioTheme,
    TypewriterTheme,
    BrutjaTheme,
)


class ThemeRegistry:
    """
    Enumerates themes and resolves them by name.

    Names are matched case-insensitively. ``find`` returns ``None`` for an
    unknown name; callers decide whether that is fatal.
    """

    def __init__(self, factories: Sequence[ThemeFactory] = BUILTIN_THEMES) -> None:
        self._factories = tuple(factories)

    def list_themes(self) -> list[Theme]:
        """Return a new instance of every theme, in catalog order."""
        return [factory() for factory in self._factories]

    def find(self, name: str) -> Theme | None:
        """Return the first theme whose name equals *name* ignoring case."""
        wanted = name.lower()
        for theme in self.list_themes():
            if theme.info().name.lower() == wanted:
                logger.debug("Resolved theme %r to %s", name, type(theme).__name__)
                return theme
        logger.debug("No theme matches %r", name)
        return None

    def names(self) -> list[str]:
        return [theme.info().name for theme in self.list_themes()]

    def duplicate_names(self) -> dict[str, int]:
        """Return names that occur more than once (case-insensitive) with counts."""
        counts = Counter(name.lower() for name in self.names())
        return {name: count for name, count in counts.items() if count > 1}

    def verify(self) -> None:
        """
        Check that theme names are unique.

        Raises:
            DuplicateThemeError: naming the first duplicated theme
        """
        duplicates = self.duplicate_names()
        if duplicates:
            name, count = next(iter(duplicates.items()))
            raise DuplicateThemeError(name, count)

    def __len__(self) -> int:
        return len(self._factories)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None

    def __repr__(self) -> str:
        return f"ThemeRegistry({len(self._factories)} themes)"


def get_all_themes() -> list[Theme]:
    """Return every built-in theme."""
    return ThemeRegistry().list_themes()


def get_theme(name: str) -> Theme | None:
    """Look up a built-in theme by case-insensitive name."""
    return ThemeRegistry().find(name)


def get_theme_by_name(name: str) -> Theme | None:
    """Alias of :func:`get_theme`."""
    return get_theme(name)
