"""Tests for registering and rendering theme templates."""

from __future__ import annotations

from datetime import date, datetime

import pytest
from jinja2 import TemplateSyntaxError

from site_theme_engine.errors import TemplateOrderError
from site_theme_engine.models import ThemeTemplates
from site_theme_engine.registry import get_all_themes
from site_theme_engine.rendering import (
    _date_filter,
    _reading_time_filter,
    create_environment,
    register_templates,
    render,
)

BASE = "<main>{% block content %}{% endblock %}</main>"
CHILD = '{% extends "base.html" %}{% block content %}hi {{ name }}{% endblock %}'


class TestRegisterTemplates:
    def test_base_first_registers(self) -> None:
        env = register_templates(ThemeTemplates("base.html", BASE).with_template("index.html", CHILD))
        assert env.get_template("index.html").render(name="you") == "<main>hi you</main>"

    def test_child_before_base_fails(self) -> None:
        templates = ThemeTemplates("index.html", CHILD).with_template("base.html", BASE)
        with pytest.raises(TemplateOrderError) as exc_info:
            register_templates(templates)
        assert exc_info.value.template == "index.html"
        assert exc_info.value.missing == "base.html"

    def test_include_must_be_registered(self) -> None:
        templates = ThemeTemplates("base.html", '{% include "footer.html" %}')
        with pytest.raises(TemplateOrderError):
            register_templates(templates)

    def test_dynamic_reference_allowed(self) -> None:
        templates = ThemeTemplates("base.html", "{% include layout %}")
        register_templates(templates)

    def test_syntax_error_propagates(self) -> None:
        with pytest.raises(TemplateSyntaxError):
            register_templates(ThemeTemplates("base.html", "{% block %}"))

    def test_requires_dict_loader(self) -> None:
        from jinja2 import Environment

        with pytest.raises(TypeError):
            register_templates(ThemeTemplates("base.html", BASE), env=Environment())

    def test_autoescape(self) -> None:
        templates = ThemeTemplates("base.html", "{{ value }}")
        assert render(templates, "base.html", {"value": "<b>"}) == "&lt;b&gt;"


@pytest.mark.parametrize("theme", get_all_themes(), ids=lambda t: t.info().name)
class TestBuiltinTemplates:
    """Every built-in bundle registers in order and renders each page."""

    def test_registers(self, theme) -> None:
        env = register_templates(theme.templates())
        assert sorted(env.list_templates()) == sorted(theme.templates().names())

    @pytest.mark.parametrize("page", ["index.html", "post.html", "archive.html", "tags.html"])
    def test_renders_page(self, theme, page, site_context) -> None:
        context = dict(site_context, theme_config=theme.info().defaults())
        html = render(theme.templates(), page, context)
        assert html.lstrip().startswith("<!DOCTYPE html>")
        assert "/static/css/style.css" in html

    def test_post_content(self, theme, site_context) -> None:
        context = dict(site_context, theme_config=theme.info().defaults())
        html = render(theme.templates(), "post.html", context)
        assert "Hello World" in html
        assert "<em>there</em>" in html

    def test_index_lists_posts(self, theme, site_context) -> None:
        context = dict(site_context, theme_config=theme.info().defaults())
        html = render(theme.templates(), "index.html", context)
        assert "second-post" in html
        assert "hello-world" in html


class TestFilters:
    def test_date_from_date(self) -> None:
        assert _date_filter(date(2024, 1, 2), "%d/%m/%Y") == "02/01/2024"

    def test_date_from_datetime(self) -> None:
        assert _date_filter(datetime(2024, 1, 2, 10, 30)) == "2024-01-02"

    def test_date_from_iso_string(self) -> None:
        assert _date_filter("2024-03-05", "%B %d, %Y") == "March 05, 2024"

    def test_date_unparseable_string(self) -> None:
        assert _date_filter("someday") == "someday"

    def test_date_empty(self) -> None:
        assert _date_filter(None) == ""

    def test_reading_time(self) -> None:
        assert _reading_time_filter("<p>" + "word " * 450 + "</p>") == 3
        assert _reading_time_filter("") == 1

    def test_filters_installed(self) -> None:
        env = create_environment()
        assert "date" in env.filters
        assert "reading_time" in env.filters
