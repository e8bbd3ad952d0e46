"""Terminal Candy: neon terminal aesthetics with a typing effect."""

from __future__ import annotations

from rich.style import Style

from site_theme_engine.models import ConfigOption, ThemeInfo
from site_theme_engine.themes.base import PackagedTheme


class TerminalCandyTheme(PackagedTheme):
    package_dir = "terminal_candy"

    def info(self) -> ThemeInfo:
        return ThemeInfo(
            name="Terminal Candy",
            version="1.0.0",
            author="Site Theme Engine Team",
            description="A playful terminal-style theme with neon colors and a typing prompt",
            config_schema={
                "primary_color": ConfigOption("#ff79c6", "Prompt and heading color"),
                "secondary_color": ConfigOption("#8be9fd", "Link color"),
                "background_color": ConfigOption("#0d0221", "Terminal background color"),
                "font_family": ConfigOption("JetBrains Mono, monospace", "Terminal font stack"),
                "prompt": ConfigOption("guest@blog:~$", "Prompt shown before page titles"),
                "typing_speed": ConfigOption(45, "Typing animation delay per character in ms"),
                "enable_glitch": ConfigOption(False, "Add a glitch effect to the site title"),
            },
        )

    def preview_style(self) -> Style:
        return Style(color="#ff79c6", bgcolor="#0d0221", bold=True)
