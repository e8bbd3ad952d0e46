"""Tests for writing theme assets."""

from __future__ import annotations

from pathlib import Path

import pytest

from site_theme_engine.assets import write_assets
from site_theme_engine.themes import ObsidianTheme


class TestWriteAssets:
    def test_writes_bytes_verbatim(self, tmp_path: Path) -> None:
        assets = {"css/style.css": b"body{}", "img/dot.gif": b"GIF89a\x01\x00\x01\x00\x00\xff"}
        written = write_assets(assets, tmp_path)

        static = tmp_path / "static"
        assert written == [static / "css" / "style.css", static / "img" / "dot.gif"]
        assert (tmp_path / "static" / "img" / "dot.gif").read_bytes() == assets["img/dot.gif"]

    def test_theme_assets(self, tmp_path: Path) -> None:
        theme = ObsidianTheme()
        write_assets(theme.assets(), tmp_path)
        for path, content in theme.assets().items():
            assert (tmp_path / "static" / path).read_bytes() == content

    @pytest.mark.parametrize("bad", ["/etc/passwd", "../escape.css", "css/../../x", ""])
    def test_rejects_unsafe_paths(self, tmp_path: Path, bad: str) -> None:
        with pytest.raises(ValueError):
            write_assets({"ok.css": b"", bad: b"x"}, tmp_path)
        assert not (tmp_path / "static").exists()

    def test_empty_mapping(self, tmp_path: Path) -> None:
        assert write_assets({}, tmp_path) == []
