"""
Theme data models.

Defines the configuration option, theme metadata and template bundle
structures every theme must provide.
"""

from __future__ import annotations

import copy
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

# ---------------------------------------------------------------------------
# Config values
# ---------------------------------------------------------------------------

ConfigValue = Union[str, int, float, bool, list, dict]
"""A theme option value: string, integer, float, boolean, array or table."""


class ValueType(Enum):
    """Tag for the kind of value held by a :data:`ConfigValue`."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    ARRAY = "array"
    TABLE = "table"

    @classmethod
    def of(cls, value: Any) -> ValueType:
        """Classify *value*. Raises ``TypeError`` for unsupported values."""
        # bool is a subclass of int
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, int):
            return cls.INTEGER
        if isinstance(value, float):
            return cls.FLOAT
        if isinstance(value, str):
            return cls.STRING
        if isinstance(value, (list, tuple)):
            return cls.ARRAY
        if isinstance(value, dict):
            return cls.TABLE
        raise TypeError(f"Unsupported config value type: {type(value).__name__}")


# ---------------------------------------------------------------------------
# ConfigOption
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ConfigOption:
    """
    A typed, documented default for one theme option.

    Attributes
    ----------
    value:
        The theme's default value. Never a live project value.
    description:
        Human-readable documentation for the option.
    """

    value: ConfigValue
    description: str = ""

    def __post_init__(self) -> None:
        ValueType.of(self.value)

    @property
    def value_type(self) -> ValueType:
        return ValueType.of(self.value)

    @property
    def type_name(self) -> str:
        return self.value_type.value

    def default(self) -> ConfigValue:
        """Return a copy of the default that callers may mutate freely."""
        return copy.deepcopy(self.value)


ConfigSchema = dict[str, ConfigOption]
"""Mapping from option name to its :class:`ConfigOption`."""


# ---------------------------------------------------------------------------
# ThemeInfo
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ThemeInfo:
    """
    Theme identity and configuration schema.

    Attributes
    ----------
    name:
        Unique identifier, compared case-insensitively.
    version:
        Theme version string.
    author:
        Theme author name or handle.
    description:
        One-line human-readable description.
    config_schema:
        Mapping from option name to its default and description.
    """

    name: str
    version: str
    author: str
    description: str
    config_schema: ConfigSchema = field(default_factory=dict)

    def as_data_row(self) -> tuple[str, str, str, str]:
        """Return ``(name, version, author, description)`` for table output."""
        return (self.name, self.version, self.author, self.description)

    def matches(self, name: str | None) -> bool:
        """Check whether *name* refers to this theme, ignoring case."""
        if name is None:
            return False
        return self.name.lower() == name.lower()

    def defaults(self) -> dict[str, ConfigValue]:
        """Return the schema flattened to option name -> default value."""
        return {key: option.default() for key, option in self.config_schema.items()}

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "version": self.version,
            "author": self.author,
            "description": self.description,
            "config_schema": {
                key: {
                    "value": option.default(),
                    "type": option.type_name,
                    "description": option.description,
                }
                for key, option in self.config_schema.items()
            },
        }


# ---------------------------------------------------------------------------
# ThemeTemplates
# ---------------------------------------------------------------------------


class ThemeTemplates:
    """
    Ordered bundle of ``(name, source)`` template pairs.

    The base template is always first: renderers register templates in
    iteration order and child templates can only extend what is already
    registered.

    Example:
        templates = (
            ThemeTemplates("base.html", BASE)
            .with_template("index.html", INDEX)
            .with_template("post.html", POST)
        )
    """

    def __init__(self, base_template_name: str, base_template: str) -> None:
        self._templates: list[tuple[str, str]] = [(base_template_name, base_template)]

    def with_template(self, name: str, template: str) -> ThemeTemplates:
        """Append a template after those already registered."""
        if any(existing == name for existing, _ in self._templates):
            raise ValueError(f"Template '{name}' is already registered")
        self._templates.append((name, template))
        return self

    @property
    def base_name(self) -> str:
        return self._templates[0][0]

    @property
    def base_source(self) -> str:
        return self._templates[0][1]

    def names(self) -> list[str]:
        return [name for name, _ in self._templates]

    def get(self, name: str) -> str | None:
        for template_name, source in self._templates:
            if template_name == name:
                return source
        return None

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(list(self._templates))

    def __len__(self) -> int:
        return len(self._templates)

    def __contains__(self, name: object) -> bool:
        return any(template_name == name for template_name, _ in self._templates)

    def __repr__(self) -> str:
        return f"ThemeTemplates({self.names()!r})"
