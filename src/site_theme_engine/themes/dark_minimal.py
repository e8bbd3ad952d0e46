"""Dark Minimal: distraction-free dark reading layout."""

from __future__ import annotations

from rich.style import Style

from site_theme_engine.models import ConfigOption, ThemeInfo
from site_theme_engine.themes.base import PackagedTheme


class DarkMinimalTheme(PackagedTheme):
    package_dir = "dark_minimal"

    def info(self) -> ThemeInfo:
        return ThemeInfo(
            name="Dark Minimal",
            version="1.0.0",
            author="Site Theme Engine Team",
            description="A distraction-free dark theme focused on long-form reading",
            config_schema={
                "accent_color": ConfigOption("#3b82f6", "Accent color for links"),
                "background_color": ConfigOption("#0f0f0f", "Page background color"),
                "text_color": ConfigOption("#e0e0e0", "Body text color"),
                "max_width": ConfigOption(720, "Maximum content width in pixels"),
                "line_height": ConfigOption(1.7, "Body line height"),
            },
        )

    def preview_style(self) -> Style:
        return Style(color="#e0e0e0", bgcolor="#0f0f0f")
