"""Musashi: ink-on-paper theme after Japanese calligraphy."""

from __future__ import annotations

from rich.style import Style

from site_theme_engine.models import ConfigOption, ThemeInfo
from site_theme_engine.themes.base import PackagedTheme


class MusashiTheme(PackagedTheme):
    package_dir = "musashi"

    def info(self) -> ThemeInfo:
        return ThemeInfo(
            name="Musashi",
            version="1.0.0",
            author="Site Theme Engine Team",
            description="Ink-on-paper theme inspired by Japanese calligraphy and sumi-e",
            config_schema={
                "ink_color": ConfigOption("#1a1a1a", "Text color"),
                "paper_color": ConfigOption("#f5f0e6", "Page background color"),
                "seal_color": ConfigOption("#b7282e", "Color of the red seal accent"),
                "font_family": ConfigOption("Noto Serif JP, serif", "Body font stack"),
                "show_brush_strokes": ConfigOption(True, "Draw brush-stroke dividers between sections"),
                "vertical_title": ConfigOption(False, "Set the site title vertically"),
            },
        )

    def preview_style(self) -> Style:
        return Style(color="#1a1a1a", bgcolor="#f5f0e6", italic=True)
