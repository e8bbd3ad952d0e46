"""Minimal Retro: a light, monospaced theme with retro accents."""

from __future__ import annotations

from rich.style import Style

from site_theme_engine.models import ConfigOption, ThemeInfo
from site_theme_engine.themes.base import PackagedTheme


class MinimalRetroTheme(PackagedTheme):
    package_dir = "minimal_retro"

    def info(self) -> ThemeInfo:
        return ThemeInfo(
            name="Minimal Retro",
            version="1.0.0",
            author="Site Theme Engine Team",
            description="A clean, minimal theme with retro typography and warm accents",
            config_schema={
                "primary_color": ConfigOption("#2d3748", "Primary text and heading color"),
                "accent_color": ConfigOption("#e53e3e", "Accent color for links and highlights"),
                "background_color": ConfigOption("#f7fafc", "Page background color"),
                "font_family": ConfigOption("Courier Prime, monospace", "Body font stack"),
                "font_size": ConfigOption(14, "Base font size in pixels"),
                "show_reading_time": ConfigOption(True, "Show estimated reading time on posts"),
            },
        )

    def preview_style(self) -> Style:
        return Style(color="#e53e3e", bgcolor="#f7fafc", bold=True)
