"""Obsidian: a dark, note-taking inspired theme."""

from __future__ import annotations

from rich.style import Style

from site_theme_engine.models import ConfigOption, ThemeInfo
from site_theme_engine.themes.base import PackagedTheme


class ObsidianTheme(PackagedTheme):
    package_dir = "obsidian"

    def info(self) -> ThemeInfo:
        return ThemeInfo(
            name="Obsidian",
            version="1.0.0",
            author="Site Theme Engine Team",
            description="Dark theme modelled on knowledge-base note apps, with callouts and backlinks",
            config_schema={
                "accent_color": ConfigOption("#7f6df2", "Accent color for links and callouts"),
                "background_color": ConfigOption("#1e1e1e", "Page background color"),
                "text_color": ConfigOption("#dcddde", "Body text color"),
                "font_family": ConfigOption("Inter, sans-serif", "Body font stack"),
                "show_callouts": ConfigOption(True, "Render '> [!note]' blockquotes as callouts"),
                "show_tags_sidebar": ConfigOption(True, "Show the tag list beside posts"),
            },
        )

    def preview_style(self) -> Style:
        return Style(color="#7f6df2", bgcolor="#1e1e1e")
