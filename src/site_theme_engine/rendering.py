"""
Jinja2 environment for theme templates.

Templates are registered in bundle order. A template may only extend,
include or import templates registered before it, which is why every
bundle starts with its base template.

Template context:
    site:          dict with ``title``, ``description``, ``author``, ``base_url``
    theme_config:  the project's merged theme options
    posts:         list of post dicts (``title``, ``slug``, ``date``, ``tags``,
                   ``summary``, ``content``), newest first
    post:          the current post (``post.html``)
    tags:          mapping of tag name to its posts (``tags.html``)
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime
from typing import Any

from jinja2 import DictLoader, Environment, meta, select_autoescape

from site_theme_engine.errors import TemplateOrderError
from site_theme_engine.logging import get_logger
from site_theme_engine.models import ThemeTemplates

logger = get_logger("rendering")

WORDS_PER_MINUTE = 200

_TAG_RE = re.compile(r"<[^>]+>")


def _date_filter(value: Any, fmt: str = "%Y-%m-%d") -> str:
    """Format a date, datetime or ISO 8601 string."""
    if value is None or value == "":
        return ""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return value
    if isinstance(value, (date, datetime)):
        return value.strftime(fmt)
    return str(value)


def _reading_time_filter(content: Any) -> int:
    """Estimated reading time in whole minutes, at least one."""
    text = _TAG_RE.sub(" ", str(content or ""))
    words = len(text.split())
    return max(1, math.ceil(words / WORDS_PER_MINUTE))


def create_environment() -> Environment:
    """Create an empty environment with the theme filters installed."""
    env = Environment(
        loader=DictLoader({}),
        autoescape=select_autoescape(["html", "xml"]),
    )
    env.filters["date"] = _date_filter
    env.filters["reading_time"] = _reading_time_filter
    return env


def register_templates(
    templates: ThemeTemplates,
    env: Environment | None = None,
) -> Environment:
    """
    Register a bundle's templates one by one, in order.

    Raises:
        TemplateOrderError: If a template references one not yet registered
        jinja2.TemplateSyntaxError: If a template does not parse
    """
    env = env or create_environment()
    loader = env.loader
    if not isinstance(loader, DictLoader):
        raise TypeError("register_templates needs an environment with a DictLoader")

    for name, source in templates:
        parsed = env.parse(source, name=name)
        for referenced in meta.find_referenced_templates(parsed):
            # None means a dynamic reference that cannot be checked statically.
            if referenced is not None and referenced not in loader.mapping:
                raise TemplateOrderError(name, referenced)
        loader.mapping[name] = source
        logger.debug("Registered template %s", name)
    return env


def render(templates: ThemeTemplates, name: str, context: dict[str, Any]) -> str:
    """Register *templates* and render the one called *name*."""
    env = register_templates(templates)
    return env.get_template(name).render(**context)
