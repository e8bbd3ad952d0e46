"""
Base theme interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from importlib import resources
from importlib.resources.abc import Traversable

from rich.style import Style

from site_theme_engine.models import ThemeInfo, ThemeTemplates

BASE_TEMPLATE = "base.html"
PAGE_TEMPLATES: tuple[str, ...] = ("index.html", "post.html", "archive.html", "tags.html")


class Theme(ABC):
    """
    Abstract base class for site themes.

    A theme is stateless: every call derives its result afresh, so
    instances can be created and discarded per query.
    """

    @abstractmethod
    def info(self) -> ThemeInfo:
        """Return the theme's identity metadata and config schema."""

    @abstractmethod
    def templates(self) -> ThemeTemplates:
        """Return the template bundle, base template first."""

    @abstractmethod
    def assets(self) -> dict[str, bytes]:
        """Return static assets keyed by relative path."""

    @abstractmethod
    def preview_style(self) -> Style:
        """Return the style used to preview the theme in a terminal."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.info().name!r})"


class PackagedTheme(Theme):
    """
    A theme whose templates and assets ship as package data.

    Subclasses set ``package_dir`` to their folder under
    ``site_theme_engine/themes`` which holds ``templates/`` and ``static/``.
    """

    package_dir: str = ""
    base_template: str = BASE_TEMPLATE
    page_templates: tuple[str, ...] = PAGE_TEMPLATES

    def _root(self) -> Traversable:
        if not self.package_dir:
            raise TypeError(f"{type(self).__name__} does not set package_dir")
        return resources.files("site_theme_engine.themes").joinpath(self.package_dir)

    def templates(self) -> ThemeTemplates:
        root = self._root().joinpath("templates")
        bundle = ThemeTemplates(
            self.base_template,
            root.joinpath(self.base_template).read_text(encoding="utf-8"),
        )
        for name in self.page_templates:
            bundle.with_template(name, root.joinpath(name).read_text(encoding="utf-8"))
        return bundle

    def assets(self) -> dict[str, bytes]:
        assets: dict[str, bytes] = {}
        _collect_assets(self._root().joinpath("static"), "", assets)
        return assets


def _collect_assets(node: Traversable, prefix: str, out: dict[str, bytes]) -> None:
    if not node.is_dir():
        return
    for child in sorted(node.iterdir(), key=lambda entry: entry.name):
        path = f"{prefix}{child.name}"
        if child.is_dir():
            _collect_assets(child, f"{path}/", out)
        elif child.is_file():
            out[path] = child.read_bytes()
