"""
Merging theme defaults into a project's theme configuration.

Switching themes fills in the new theme's defaults for options the project
has not set, and never touches values that are already there. Keys the new
theme does not know about are kept so that switching back restores them.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from site_theme_engine.errors import ConfigError, ThemeNotFoundError
from site_theme_engine.logging import get_logger
from site_theme_engine.models import ConfigOption, ConfigValue, ThemeInfo, ValueType
from site_theme_engine.registry import ThemeRegistry

logger = get_logger("resolver")


@dataclass
class ProjectThemeConfig:
    """The ``theme`` section of a project's configuration."""

    name: str
    config: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ProjectThemeConfig:
        """
        Create a theme section from a dictionary.

        A null or missing ``name`` becomes the empty string.

        Raises:
            ConfigError: If ``config`` is present but not a mapping
        """
        name = data.get("name")
        config = data.get("config")
        if config is None:
            config = {}
        elif not isinstance(config, Mapping):
            raise ConfigError("'theme.config' must be a mapping")
        return cls(
            name="" if name is None else str(name),
            config=dict(config),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "config": copy.deepcopy(self.config)}

    def copy(self) -> ProjectThemeConfig:
        return ProjectThemeConfig(name=self.name, config=copy.deepcopy(self.config))


@dataclass
class ApplyResult:
    """Outcome of switching a project to a theme."""

    config: ProjectThemeConfig
    theme_info: ThemeInfo
    added: list[str] = field(default_factory=list)


def missing_keys(schema: Mapping[str, ConfigOption], config: Mapping[str, Any]) -> list[str]:
    """Return the schema options absent from *config*, sorted by name."""
    return sorted(key for key in schema if key not in config)


def merge_defaults(
    schema: Mapping[str, ConfigOption],
    config: Mapping[str, Any],
) -> dict[str, Any]:
    """
    Fill absent options in *config* with the schema's defaults.

    Existing values win, whatever their type, and keys unknown to the schema
    are carried over unchanged. Returns a new mapping; *config* is not
    modified.
    """
    merged = copy.deepcopy(dict(config))
    for option_name, option in schema.items():
        if option_name not in merged:
            merged[option_name] = option.default()
    return merged


def apply_theme(
    current: ProjectThemeConfig,
    name: str,
    registry: ThemeRegistry | None = None,
) -> ApplyResult:
    """
    Switch a project's theme configuration to the theme called *name*.

    Args:
        current: The project's current theme section (left unmodified)
        name: Theme name, matched case-insensitively
        registry: Registry to resolve from (defaults to the built-in catalog)

    Returns:
        ApplyResult with the new config and the keys filled from defaults

    Raises:
        ThemeNotFoundError: If no theme matches *name*
    """
    theme = (registry or ThemeRegistry()).find(name)
    if theme is None:
        raise ThemeNotFoundError(name)

    info = theme.info()
    added = missing_keys(info.config_schema, current.config)
    resolved = ProjectThemeConfig(
        name=name,
        config=merge_defaults(info.config_schema, current.config),
    )
    logger.debug(
        "Applied theme %s (from %r): %d default(s) added, %d key(s) kept",
        info.name,
        current.name,
        len(added),
        len(current.config),
    )
    return ApplyResult(config=resolved, theme_info=info, added=added)


def validate_config(
    schema: Mapping[str, ConfigOption],
    config: Mapping[str, ConfigValue],
) -> list[str]:
    """
    Report differences between a project's config and a theme's schema.

    Returns a list of warning messages (empty if the config matches). The
    merge never calls this; unknown keys and divergent types are tolerated.
    """
    warnings: list[str] = []
    for key, value in config.items():
        option = schema.get(key)
        if option is None:
            warnings.append(f"Option '{key}' is not used by this theme")
            continue
        try:
            actual = ValueType.of(value)
        except TypeError:
            warnings.append(f"Option '{key}' has unsupported type {type(value).__name__}")
            continue
        expected = option.value_type
        # An integer is acceptable where a float is expected.
        if actual is ValueType.INTEGER and expected is ValueType.FLOAT:
            continue
        if actual is not expected:
            warnings.append(
                f"Option '{key}' should be {expected.value}, got {actual.value}"
            )
    return warnings
