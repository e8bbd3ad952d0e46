"""Brutja: a neo-brutalist theme with hard borders and loud color."""

from __future__ import annotations

from rich.style import Style

from site_theme_engine.models import ConfigOption, ThemeInfo
from site_theme_engine.themes.base import PackagedTheme


class BrutjaTheme(PackagedTheme):
    package_dir = "brutja"

    def info(self) -> ThemeInfo:
        return ThemeInfo(
            name="Brutja",
            version="1.0.0",
            author="Site Theme Engine Team",
            description="Neo-brutalist theme with thick borders, hard shadows and loud color",
            config_schema={
                "primary_color": ConfigOption("#000000", "Border and text color"),
                "accent_color": ConfigOption("#ffde59", "Highlight color for cards and buttons"),
                "background_color": ConfigOption("#ffffff", "Page background color"),
                "border_width": ConfigOption(4, "Border width in pixels"),
                "font_family": ConfigOption("Space Grotesk, sans-serif", "Body font stack"),
                "uppercase_headings": ConfigOption(True, "Render headings in uppercase"),
            },
        )

    def preview_style(self) -> Style:
        return Style(color="#000000", bgcolor="#ffde59", bold=True)
