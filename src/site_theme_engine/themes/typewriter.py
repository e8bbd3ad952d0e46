"""Typewriter: paper texture and typewriter type."""

from __future__ import annotations

from rich.style import Style

from site_theme_engine.models import ConfigOption, ThemeInfo
from site_theme_engine.themes.base import PackagedTheme


class TypewriterTheme(PackagedTheme):
    package_dir = "typewriter"

    def info(self) -> ThemeInfo:
        return ThemeInfo(
            name="Typewriter",
            version="1.0.0",
            author="Site Theme Engine Team",
            description="Vintage typewriter theme with paper texture and ink-stamped headings",
            config_schema={
                "paper_color": ConfigOption("#fdf6e3", "Page background color"),
                "ink_color": ConfigOption("#2b2b2b", "Text color"),
                "font_family": ConfigOption("Special Elite, monospace", "Body font stack"),
                "line_height": ConfigOption(1.8, "Body line height"),
                "paper_texture": ConfigOption(True, "Overlay a subtle paper texture"),
            },
        )

    def preview_style(self) -> Style:
        return Style(color="#2b2b2b", bgcolor="#fdf6e3")
