"""Built-in themes."""
from __future__ import annotations

from site_theme_engine.themes.base import PackagedTheme, Theme
from site_theme_engine.themes.brutja import BrutjaTheme
from site_theme_engine.themes.dark_minimal import DarkMinimalTheme
from site_theme_engine.themes.minimal_retro import MinimalRetroTheme
from site_theme_engine.themes.musashi import MusashiTheme
from site_theme_engine.themes.obsidian import ObsidianTheme
from site_theme_engine.themes.slate_portfolio import SlatePortfolioTheme
from site_theme_engine.themes.terminal_candy import TerminalCandyTheme
from site_theme_engine.themes.typewriter import TypewriterTheme

__all__ = [
    "BrutjaTheme",
    "DarkMinimalTheme",
    "MinimalRetroTheme",
    "MusashiTheme",
    "ObsidianTheme",
    "PackagedTheme",
    "SlatePortfolioTheme",
    "TerminalCandyTheme",
    "Theme",
    "TypewriterTheme",
]
