"""
Command-line interface for the theme engine.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from site_theme_engine import catalog
from site_theme_engine.assets import write_assets
from site_theme_engine.config import SiteConfig, default_config_path, load_site_config
from site_theme_engine.errors import ThemeEngineError, ThemeNotFoundError
from site_theme_engine.logging import setup_logging
from site_theme_engine.registry import get_theme
from site_theme_engine.resolver import apply_theme

console = Console()

SAMPLE_POST = [
    "# Welcome to My Blog",
    "Published on January 1, 2024 by Jane Doe",
    "",
    "This is a sample post showing how your content would look",
]


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Browse, preview and select site themes",
        prog="site-themes",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output (debug logging)",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Project configuration file (default: $SITE_THEMES_CONFIG or ./site.yaml)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    list_parser = subparsers.add_parser("list", help="List available themes")
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")

    info_parser = subparsers.add_parser("info", help="Show theme details")
    info_parser.add_argument("name", help="Theme name")

    set_parser = subparsers.add_parser("set", help="Switch the project to a theme")
    set_parser.add_argument("name", help="Theme name")

    preview_parser = subparsers.add_parser("preview", help="Preview a theme")
    preview_parser.add_argument("name", help="Theme name")

    export_parser = subparsers.add_parser("export", help="Write a theme's static assets")
    export_parser.add_argument("name", help="Theme name")
    export_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path("public"),
        help="Output directory",
    )

    args = parser.parse_args(argv)

    if getattr(args, "verbose", False):
        setup_logging("DEBUG")
    else:
        setup_logging("WARNING")

    commands = {
        "list": cmd_list,
        "info": cmd_info,
        "set": cmd_set,
        "preview": cmd_preview,
        "export": cmd_export,
    }
    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return

    try:
        handler(args)
    except ThemeEngineError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        if e.suggestion:
            console.print(f"[dim]{escape(e.suggestion)}[/dim]")
        sys.exit(1)


def _config_path(args: argparse.Namespace) -> Path:
    return args.config if getattr(args, "config", None) else default_config_path()


def _load_project(args: argparse.Namespace) -> SiteConfig | None:
    return load_site_config(_config_path(args))


def _active_theme_name(args: argparse.Namespace) -> str | None:
    project = _load_project(args)
    return project.theme.name if project is not None else None


def cmd_list(args: argparse.Namespace) -> None:
    """List available themes."""
    rows = catalog.list_entries(active_name=_active_theme_name(args))

    if args.json:
        console.print_json(json.dumps([row.to_dict() for row in rows], indent=2))
        return

    table = Table(title="Available Themes")
    table.add_column("Name", style="cyan")
    table.add_column("Version", style="dim")
    table.add_column("Author")
    table.add_column("Description")

    for row in rows:
        name = f"✅ {row.name} (active)" if row.active else f"📦 {row.name}"
        table.add_row(
            escape(name), escape(row.version), escape(row.author), escape(row.description)
        )

    console.print(table)
    console.print(f"\n[dim]Total: {len(rows)} themes[/dim]")
    console.print("💡 Use 'site-themes info <name>' for detailed information")


def cmd_info(args: argparse.Namespace) -> None:
    """Show theme details."""
    project = _load_project(args)
    active_name = project.theme.name if project is not None else None
    description = catalog.describe(args.name, active_name=active_name)
    info = description.info

    console.print(f"\n[bold]🎨 {escape(info.name)}[/bold]")
    console.print(f"[dim]{escape(info.description)}[/dim]\n")
    console.print(f"  Author: {escape(info.author)}")
    console.print(f"  Version: {escape(info.version)}\n")

    if description.options:
        console.print("[bold]Configuration options:[/bold]")
        for option in description.options:
            default = escape(repr(option.default))
            console.print(f"  - {escape(option.name)}: {default} ({escape(option.description)})")
    else:
        console.print("[dim]No configuration options available[/dim]")

    if project is None:
        return
    if description.active:
        console.print("\n[green]✓ This theme is currently active[/green]")
    else:
        console.print(f"\n💡 Use 'site-themes set {escape(args.name)}' to activate this theme")


def cmd_set(args: argparse.Namespace) -> None:
    """Switch the project to a theme and save the merged configuration."""
    path = _config_path(args)
    project = load_site_config(path)
    if project is None:
        console.print(f"[red]No project configuration found at {escape(str(path))}[/red]")
        console.print("[dim]Create one or pass --config.[/dim]")
        sys.exit(1)

    result = apply_theme(project.theme, args.name)
    project.theme = result.config
    project.save(path)

    console.print(f"[green]Theme set to: {escape(result.config.name)}[/green]")
    console.print(f"[dim]Configuration updated in {escape(str(path))}[/dim]")
    if result.added:
        console.print(f"  Added defaults: {escape(', '.join(result.added))}")
    if result.theme_info.config_schema:
        console.print(
            f"\n💡 Use 'site-themes info {escape(args.name)}' to see available configuration options"
        )


def cmd_preview(args: argparse.Namespace) -> None:
    """Preview a theme without activating it."""
    data = catalog.preview(args.name)
    info = data.info

    console.print()
    console.print(Text(f"🎨 Theme Preview: {info.name}", style=data.style))
    console.print("─" * 50)
    console.print(f"Description: {escape(info.description)}")
    console.print(f"Author: {escape(info.author)}")
    console.print(f"Version: {escape(info.version)}\n")

    if data.options:
        console.print("[bold]Available configuration options:[/bold]")
        for option in data.options:
            console.print(
                f"  • {escape(option.name)} ({option.type_name}): {escape(option.description)}"
            )
            console.print(f"    Default: {escape(repr(option.default))}")
    else:
        console.print("[dim]No configuration options available[/dim]")

    console.print("\n[bold]Sample content:[/bold]")
    console.print("─" * 50)
    for line in SAMPLE_POST:
        console.print(Text(line, style=data.style))
    console.print(Text(f"with the {info.name} theme.", style=data.style))
    for option in data.color_options:
        console.print(f"  • {escape(option.name.replace('_', ' '))}: {escape(str(option.default))}")
    console.print("─" * 50)
    console.print(f"[dim]Templates: {escape(', '.join(data.template_names))}[/dim]")
    console.print(f"[dim]Assets: {escape(', '.join(data.asset_paths))}[/dim]")

    project = _load_project(args)
    if project is None:
        console.print("\n💡 Create a project configuration to use this theme")
    elif info.matches(project.theme.name):
        console.print("\n[green]✓ This theme is currently active in your project[/green]")
    else:
        console.print(
            f"\n💡 Like this theme? Use 'site-themes set {escape(args.name)}' to activate it"
        )


def cmd_export(args: argparse.Namespace) -> None:
    """Write a theme's static assets to an output directory."""
    theme = get_theme(args.name)
    if theme is None:
        raise ThemeNotFoundError(args.name)

    written = write_assets(theme.assets(), args.output)
    for path in written:
        console.print(f"  [green]✓[/green] {escape(str(path))}")
    console.print(f"\n[dim]Wrote {len(written)} asset(s) for {escape(theme.info().name)}[/dim]")


if __name__ == "__main__":
    main()
