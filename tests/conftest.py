"""Shared pytest fixtures for site-theme-engine tests."""

from datetime import date
from pathlib import Path
from textwrap import dedent

import pytest
from rich.style import Style

from site_theme_engine.models import ConfigOption, ThemeInfo, ThemeTemplates
from site_theme_engine.themes import Theme

STUB_BASE = "<html><body>{% block content %}{% endblock %}</body></html>"
STUB_INDEX = '{% extends "base.html" %}{% block content %}{{ site.title }}{% endblock %}'


class StubTheme(Theme):
    """Minimal in-memory theme; subclasses override the class attributes."""

    theme_name = "Stub"
    schema: dict[str, ConfigOption] = {}

    def info(self) -> ThemeInfo:
        return ThemeInfo(
            name=self.theme_name,
            version="0.0.1",
            author="tests",
            description=f"{self.theme_name} test theme",
            config_schema=dict(self.schema),
        )

    def templates(self) -> ThemeTemplates:
        return ThemeTemplates("base.html", STUB_BASE).with_template("index.html", STUB_INDEX)

    def assets(self) -> dict[str, bytes]:
        return {"css/style.css": b"body { margin: 0; }"}

    def preview_style(self) -> Style:
        return Style(color="red")


@pytest.fixture
def make_theme():
    """Factory for stub theme classes with a given name and schema."""

    def _make(name: str, schema: dict[str, ConfigOption] | None = None) -> type[Theme]:
        return type(
            "GeneratedTheme",
            (StubTheme,),
            {"theme_name": name, "schema": dict(schema or {})},
        )

    return _make


@pytest.fixture
def retro_schema() -> dict[str, ConfigOption]:
    return {
        "accent_color": ConfigOption("red", "Accent color"),
        "font_size": ConfigOption(14, "Base font size"),
    }


@pytest.fixture
def project_file(tmp_path: Path) -> Path:
    """A project configuration file using a theme that is not built in."""
    path = tmp_path / "site.yaml"
    path.write_text(
        dedent(
            """\
            site:
              title: My Blog
              author: Jane Doe
            theme:
              name: old
              config:
                accent_color: blue
            """
        )
    )
    return path


@pytest.fixture
def obsidian_project(tmp_path: Path) -> Path:
    """A project configuration file using the Obsidian theme."""
    path = tmp_path / "site.yaml"
    path.write_text(
        dedent(
            """\
            site:
              title: Notes
            theme:
              name: obsidian
              config:
                accent_color: "#ff0000"
            """
        )
    )
    return path


@pytest.fixture(autouse=True)
def _isolate_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SITE_THEMES_CONFIG", raising=False)


@pytest.fixture
def site_context() -> dict:
    """Template context with two posts."""
    posts = [
        {
            "title": "Second post",
            "slug": "second-post",
            "date": date(2024, 3, 2),
            "tags": ["python", "themes"],
            "summary": "More words.",
            "content": "<p>" + " ".join(["word"] * 450) + "</p>",
        },
        {
            "title": "Hello World",
            "slug": "hello-world",
            "date": "2024-01-01",
            "tags": ["intro"],
            "summary": "The first post.",
            "content": "<p>Hello <em>there</em>.</p>",
        },
    ]
    tags: dict[str, list] = {}
    for post in posts:
        for tag in post["tags"]:
            tags.setdefault(tag, []).append(post)
    return {
        "site": {
            "title": "My Blog",
            "description": "Notes on things",
            "author": "Jane Doe",
            "base_url": "",
        },
        "posts": posts,
        "post": posts[1],
        "tags": tags,
    }
