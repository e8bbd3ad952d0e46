"""
Listing, inspection and preview data for themes.

These functions return plain data that front ends (the CLI, a TUI, an HTML
preview) render however they like.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from rich.style import Style

from site_theme_engine.errors import ThemeNotFoundError
from site_theme_engine.models import ConfigValue, ThemeInfo
from site_theme_engine.registry import ThemeRegistry


def is_active(info: ThemeInfo, active_name: str | None) -> bool:
    """A theme is active when its name equals the project's theme name, ignoring case."""
    return info.matches(active_name)


@dataclass
class ThemeListing:
    """One row of the theme list."""

    name: str
    version: str
    author: str
    description: str
    active: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "version": self.version,
            "author": self.author,
            "description": self.description,
            "active": self.active,
        }


@dataclass
class OptionDetail:
    """A schema option prepared for display."""

    name: str
    default: ConfigValue
    description: str
    type_name: str


@dataclass
class ThemeDescription:
    info: ThemeInfo
    options: list[OptionDetail] = field(default_factory=list)
    active: bool = False


@dataclass
class ThemePreview:
    """Everything needed to preview a theme without activating it."""

    info: ThemeInfo
    options: list[OptionDetail]
    style: Style
    template_names: list[str] = field(default_factory=list)
    asset_paths: list[str] = field(default_factory=list)

    @property
    def color_options(self) -> list[OptionDetail]:
        return [option for option in self.options if "color" in option.name]


def _options(info: ThemeInfo) -> list[OptionDetail]:
    return [
        OptionDetail(
            name=name,
            default=option.default(),
            description=option.description,
            type_name=option.type_name,
        )
        for name, option in sorted(info.config_schema.items())
    ]


def list_entries(
    active_name: str | None = None,
    registry: ThemeRegistry | None = None,
) -> list[ThemeListing]:
    """
    List every theme in catalog order.

    Args:
        active_name: The project's current theme name, or None outside a project
        registry: Registry to list (defaults to the built-in catalog)
    """
    rows: list[ThemeListing] = []
    for theme in (registry or ThemeRegistry()).list_themes():
        info = theme.info()
        rows.append(
            ThemeListing(
                name=info.name,
                version=info.version,
                author=info.author,
                description=info.description,
                active=is_active(info, active_name),
            )
        )
    return rows


def describe(
    name: str,
    active_name: str | None = None,
    registry: ThemeRegistry | None = None,
) -> ThemeDescription:
    """Describe a theme's metadata and options. Raises ThemeNotFoundError."""
    theme = (registry or ThemeRegistry()).find(name)
    if theme is None:
        raise ThemeNotFoundError(name)
    info = theme.info()
    return ThemeDescription(
        info=info,
        options=_options(info),
        active=is_active(info, active_name),
    )


def preview(name: str, registry: ThemeRegistry | None = None) -> ThemePreview:
    """Build preview data for a theme. Raises ThemeNotFoundError."""
    theme = (registry or ThemeRegistry()).find(name)
    if theme is None:
        raise ThemeNotFoundError(name)
    info = theme.info()
    return ThemePreview(
        info=info,
        options=_options(info),
        style=theme.preview_style(),
        template_names=theme.templates().names(),
        asset_paths=sorted(theme.assets()),
    )
