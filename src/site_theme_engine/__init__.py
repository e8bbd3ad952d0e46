"""
Site Theme Engine - built-in themes for a static blog authoring tool.

Each theme provides metadata, an ordered template bundle, static assets, a
typed configuration schema and a terminal preview style. Switching a project
to a theme fills in that theme's defaults without overwriting any option the
project already sets.

Example:
    from site_theme_engine import SiteConfig, apply_theme, get_theme

    config = SiteConfig.from_yaml(Path("site.yaml"))
    result = apply_theme(config.theme, "obsidian")
    config.theme = result.config
    config.save(Path("site.yaml"))

    theme = get_theme("Obsidian")
    for name, source in theme.templates():
        ...
"""

from site_theme_engine.assets import write_assets
from site_theme_engine.catalog import (
    OptionDetail,
    ThemeDescription,
    ThemeListing,
    ThemePreview,
    describe,
    is_active,
    list_entries,
    preview,
)
from site_theme_engine.config import SiteConfig, default_config_path, load_site_config
from site_theme_engine.errors import (
    ConfigError,
    ConfigPersistenceError,
    DuplicateThemeError,
    TemplateOrderError,
    ThemeEngineError,
    ThemeNotFoundError,
)
from site_theme_engine.models import (
    ConfigOption,
    ConfigSchema,
    ConfigValue,
    ThemeInfo,
    ThemeTemplates,
    ValueType,
)
from site_theme_engine.registry import (
    BUILTIN_THEMES,
    ThemeRegistry,
    get_all_themes,
    get_theme,
    get_theme_by_name,
)
from site_theme_engine.rendering import create_environment, register_templates, render
from site_theme_engine.resolver import (
    ApplyResult,
    ProjectThemeConfig,
    apply_theme,
    merge_defaults,
    missing_keys,
    validate_config,
)
from site_theme_engine.themes import PackagedTheme, Theme

__version__ = "0.1.0"

__all__ = [
    # Models
    "ConfigOption",
    "ConfigSchema",
    "ConfigValue",
    "ThemeInfo",
    "ThemeTemplates",
    "ValueType",
    # Themes
    "BUILTIN_THEMES",
    "PackagedTheme",
    "Theme",
    "ThemeRegistry",
    "get_all_themes",
    "get_theme",
    "get_theme_by_name",
    # Resolver
    "ApplyResult",
    "ProjectThemeConfig",
    "apply_theme",
    "merge_defaults",
    "missing_keys",
    "validate_config",
    # Catalog
    "OptionDetail",
    "ThemeDescription",
    "ThemeListing",
    "ThemePreview",
    "describe",
    "is_active",
    "list_entries",
    "preview",
    # Config
    "SiteConfig",
    "default_config_path",
    "load_site_config",
    # Rendering and assets
    "create_environment",
    "register_templates",
    "render",
    "write_assets",
    # Errors
    "ConfigError",
    "ConfigPersistenceError",
    "DuplicateThemeError",
    "TemplateOrderError",
    "ThemeEngineError",
    "ThemeNotFoundError",
]
