"""Slate Portfolio: a portfolio layout with project cards."""

from __future__ import annotations

from rich.style import Style

from site_theme_engine.models import ConfigOption, ThemeInfo
from site_theme_engine.themes.base import PackagedTheme


class SlatePortfolioTheme(PackagedTheme):
    package_dir = "slate_portfolio"

    def info(self) -> ThemeInfo:
        return ThemeInfo(
            name="Slate Portfolio",
            version="1.0.0",
            author="Site Theme Engine Team",
            description="Slate-toned portfolio theme with a hero section and project cards",
            config_schema={
                "accent_color": ConfigOption("#38bdf8", "Accent color for buttons and links"),
                "background_color": ConfigOption("#0f172a", "Page background color"),
                "hero_title": ConfigOption("Hi, I build things.", "Headline in the hero section"),
                "show_projects": ConfigOption(True, "Show the projects grid on the home page"),
                "projects": ConfigOption(
                    [],
                    "Project cards: a list of tables with name, url and summary",
                ),
                "social_links": ConfigOption(
                    {"github": "", "mastodon": "", "email": ""},
                    "Social profile links shown in the footer",
                ),
            },
        )

    def preview_style(self) -> Style:
        return Style(color="#38bdf8", bgcolor="#0f172a", bold=True)
