#!/usr/bin/env python3
"""
Demo: switch a project between themes without losing customizations.

Usage:
    python examples/switch_theme_demo.py
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from rich.console import Console

from site_theme_engine import SiteConfig, apply_theme, get_theme, list_entries, render
from site_theme_engine.logging import setup_logging

console = Console()


def main() -> None:
    setup_logging("DEBUG")

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "site.yaml"
        path.write_text(
            "site:\n  title: Demo\ntheme:\n  name: Obsidian\n  config:\n    accent_color: '#ff8800'\n"
        )

        config = SiteConfig.from_yaml(path)
        for row in list_entries(active_name=config.theme.name):
            marker = "*" if row.active else " "
            console.print(f" {marker} {row.name} ({row.version})")

        for name in ("Typewriter", "Obsidian"):
            result = apply_theme(config.theme, name)
            config.theme = result.config
            config.save(path)
            console.print(f"\n[bold]{name}[/bold] added: {', '.join(result.added) or '-'}")

        console.print(f"\n[dim]{path.read_text()}[/dim]")

        html = render(
            get_theme(config.theme.name).templates(),
            "index.html",
            {
                "site": {"title": "Demo", "description": "", "author": "me", "base_url": ""},
                "theme_config": config.theme.config,
                "posts": [],
                "tags": {},
            },
        )
        console.print(f"Rendered index.html: {len(html)} characters")


if __name__ == "__main__":
    main()
