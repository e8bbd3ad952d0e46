"""Tests for theme data models: ConfigOption, ThemeInfo, ThemeTemplates."""

from __future__ import annotations

import dataclasses

import pytest

from site_theme_engine.models import ConfigOption, ThemeInfo, ThemeTemplates, ValueType


# ---------------------------------------------------------------------------
# TestValueType
# ---------------------------------------------------------------------------


class TestValueType:
    """Tests for classifying config values."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("#fff", ValueType.STRING),
            (14, ValueType.INTEGER),
            (1.5, ValueType.FLOAT),
            (True, ValueType.BOOLEAN),
            (False, ValueType.BOOLEAN),
            ([1, 2], ValueType.ARRAY),
            ({"github": ""}, ValueType.TABLE),
        ],
    )
    def test_of(self, value, expected) -> None:
        assert ValueType.of(value) is expected

    def test_unsupported_type_raises(self) -> None:
        with pytest.raises(TypeError):
            ValueType.of(None)


# ---------------------------------------------------------------------------
# TestConfigOption
# ---------------------------------------------------------------------------


class TestConfigOption:
    """Tests for the ConfigOption dataclass."""

    def test_type_name(self) -> None:
        assert ConfigOption(14, "size").type_name == "integer"
        assert ConfigOption({"a": 1}, "table").type_name == "table"

    def test_is_immutable(self) -> None:
        option = ConfigOption("red", "Accent")
        with pytest.raises(dataclasses.FrozenInstanceError):
            option.value = "blue"  # type: ignore[misc]

    def test_default_returns_copy(self) -> None:
        option = ConfigOption({"github": ""}, "Links")
        default = option.default()
        default["github"] = "https://github.com/me"
        assert option.value == {"github": ""}

    def test_rejects_unsupported_value(self) -> None:
        with pytest.raises(TypeError):
            ConfigOption(object(), "bad")


# ---------------------------------------------------------------------------
# TestThemeInfo
# ---------------------------------------------------------------------------


class TestThemeInfo:
    """Tests for the ThemeInfo dataclass."""

    @pytest.fixture
    def info(self) -> ThemeInfo:
        return ThemeInfo(
            name="Minimal Retro",
            version="1.0.0",
            author="tester",
            description="A test theme",
            config_schema={
                "accent_color": ConfigOption("red", "Accent"),
                "font_size": ConfigOption(14, "Size"),
            },
        )

    def test_as_data_row(self, info: ThemeInfo) -> None:
        assert info.as_data_row() == ("Minimal Retro", "1.0.0", "tester", "A test theme")

    def test_matches_ignores_case(self, info: ThemeInfo) -> None:
        assert info.matches("minimal retro")
        assert info.matches("MINIMAL RETRO")
        assert not info.matches("minimal-retro")
        assert not info.matches(None)

    def test_defaults(self, info: ThemeInfo) -> None:
        assert info.defaults() == {"accent_color": "red", "font_size": 14}

    def test_to_dict(self, info: ThemeInfo) -> None:
        data = info.to_dict()
        assert data["name"] == "Minimal Retro"
        assert data["config_schema"]["font_size"] == {
            "value": 14,
            "type": "integer",
            "description": "Size",
        }

    def test_empty_schema_by_default(self) -> None:
        info = ThemeInfo(name="x", version="1", author="a", description="d")
        assert info.config_schema == {}


# ---------------------------------------------------------------------------
# TestThemeTemplates
# ---------------------------------------------------------------------------


class TestThemeTemplates:
    """Tests for the ordered template bundle."""

    def test_base_is_first(self) -> None:
        templates = (
            ThemeTemplates("base.html", "BASE")
            .with_template("index.html", "INDEX")
            .with_template("post.html", "POST")
        )
        assert list(templates)[0] == ("base.html", "BASE")
        assert templates.base_name == "base.html"
        assert templates.base_source == "BASE"

    def test_preserves_registration_order(self) -> None:
        templates = (
            ThemeTemplates("base.html", "")
            .with_template("post.html", "")
            .with_template("index.html", "")
        )
        assert templates.names() == ["base.html", "post.html", "index.html"]

    def test_len_and_contains(self) -> None:
        templates = ThemeTemplates("base.html", "").with_template("index.html", "")
        assert len(templates) == 2
        assert "index.html" in templates
        assert "missing.html" not in templates

    def test_get(self) -> None:
        templates = ThemeTemplates("base.html", "B").with_template("index.html", "I")
        assert templates.get("index.html") == "I"
        assert templates.get("missing.html") is None

    def test_duplicate_name_raises(self) -> None:
        templates = ThemeTemplates("base.html", "")
        with pytest.raises(ValueError, match="already registered"):
            templates.with_template("base.html", "other")

    def test_iteration_is_repeatable(self) -> None:
        templates = ThemeTemplates("base.html", "").with_template("index.html", "")
        assert list(templates) == list(templates)
