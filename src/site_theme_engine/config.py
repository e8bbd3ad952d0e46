"""
Project configuration file.

The project file holds a ``theme`` section plus whatever other sections the
authoring tool keeps there; those are preserved verbatim.

Example YAML:
    site:
      title: My Blog
      author: Jane Doe
    theme:
      name: Minimal Retro
      config:
        accent_color: "#e53e3e"
        font_size: 14
"""

from __future__ import annotations

import os
import stat
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from site_theme_engine.errors import ConfigError, ConfigPersistenceError
from site_theme_engine.logging import get_logger
from site_theme_engine.resolver import ProjectThemeConfig

logger = get_logger("config")

CONFIG_ENV_VAR = "SITE_THEMES_CONFIG"
DEFAULT_CONFIG_FILE = "site.yaml"
DEFAULT_THEME = "Minimal Retro"


def default_config_path() -> Path:
    """Get the project file path from ``SITE_THEMES_CONFIG``, or ``./site.yaml``."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return Path.cwd() / DEFAULT_CONFIG_FILE


@dataclass
class SiteConfig:
    """A project's configuration file."""

    theme: ProjectThemeConfig = field(
        default_factory=lambda: ProjectThemeConfig(name=DEFAULT_THEME)
    )
    extra: dict[str, Any] = field(default_factory=dict)  # Other top-level sections

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SiteConfig:
        """Create config from a dictionary."""
        extra = {key: value for key, value in data.items() if key != "theme"}
        theme_data = data.get("theme")
        if theme_data is None:
            theme = ProjectThemeConfig(name=DEFAULT_THEME)
        elif isinstance(theme_data, dict):
            theme = ProjectThemeConfig.from_dict(theme_data)
            if not theme.name:
                theme.name = DEFAULT_THEME
        else:
            raise ConfigError("'theme' must be a mapping")
        return cls(theme=theme, extra=extra)

    @classmethod
    def from_yaml(cls, path: Path) -> SiteConfig:
        """Load config from a YAML file."""
        with open(path, encoding="utf-8") as f:
            text = f.read()
        return cls.from_yaml_string(text)

    @classmethod
    def from_yaml_string(cls, content: str) -> SiteConfig:
        """Load config from a YAML string."""
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid project configuration: {exc}") from exc
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError("Project configuration must be a mapping")
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a dictionary."""
        data = dict(self.extra)
        data["theme"] = self.theme.to_dict()
        return data

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_dict(), default_flow_style=False, sort_keys=False)

    def save(self, path: Path) -> None:
        """
        Write the config to *path* atomically.

        The YAML is written to a temporary file next to *path* and moved into
        place, so a failed write leaves the previous file untouched. An
        existing file keeps its permission bits.

        Raises:
            ConfigPersistenceError: If the file cannot be written
        """
        path = Path(path)
        content = self.to_yaml()
        tmp_name: str | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(content)
            # NamedTemporaryFile creates 0600 files.
            if path.exists():
                os.chmod(tmp_name, stat.S_IMODE(path.stat().st_mode))
            os.replace(tmp_name, path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise ConfigPersistenceError(
                f"Failed to save {path}: {exc}",
                suggestion="Check that the project directory is writable.",
            ) from exc
        logger.debug("Saved project configuration to %s", path)


def load_site_config(path: Path | None = None) -> SiteConfig | None:
    """
    Load the project file, or return ``None`` when it does not exist.

    Raises:
        ConfigError: If the file exists but cannot be read or parsed
    """
    path = Path(path) if path is not None else default_config_path()
    if not path.exists():
        logger.debug("No project configuration at %s", path)
        return None
    try:
        return SiteConfig.from_yaml(path)
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
