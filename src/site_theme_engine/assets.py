"""Writing theme assets into a build directory."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path, PurePosixPath

from site_theme_engine.logging import get_logger

logger = get_logger("assets")

STATIC_DIR = "static"


def _safe_relative(asset_path: str) -> PurePosixPath:
    relative = PurePosixPath(asset_path)
    if not asset_path or relative.is_absolute() or ".." in relative.parts:
        raise ValueError(f"Invalid asset path: {asset_path!r}")
    return relative


def write_assets(assets: Mapping[str, bytes], output_dir: Path) -> list[Path]:
    """
    Write assets verbatim under ``output_dir/static``.

    Args:
        assets: Mapping of relative POSIX path to file content
        output_dir: Site output directory

    Returns:
        Paths written, in sorted asset order

    Raises:
        ValueError: If an asset path is absolute or escapes the directory
    """
    # Validate everything before touching the file system.
    targets = [
        (Path(output_dir) / STATIC_DIR / _safe_relative(path), content)
        for path, content in sorted(assets.items())
    ]
    written: list[Path] = []
    for target, content in targets:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)
        written.append(target)
    logger.debug("Wrote %d asset(s) to %s", len(written), output_dir)
    return written
