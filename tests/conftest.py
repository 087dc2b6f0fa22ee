"""Shared fixtures for iconsmith tests."""

from pathlib import Path

import pytest

SQUARE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">'
    '<path d="M2 2h20v20H2z"/>'
    "</svg>"
)

CIRCLE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="48" height="48">'
    '<circle cx="24" cy="24" r="20"/>'
    "</svg>"
)

CURVE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 50">'
    '<g transform="translate(10 5)">'
    '<path d="M0 40C0 10 80 10 80 40Z"/>'
    "</g>"
    "</svg>"
)


def write_icons(directory: Path, names: list[str], svg: str = SQUARE_SVG) -> list[Path]:
    """Write one SVG file per name into directory."""
    directory.mkdir(parents=True, exist_ok=True)
    paths = []
    for name in names:
        path = directory / name
        path.write_text(svg, encoding="utf-8")
        paths.append(path)
    return paths


@pytest.fixture
def svg_dir(tmp_path: Path) -> Path:
    """Input directory with a.svg, b.svg and c-1.svg."""
    directory = tmp_path / "svg"
    write_icons(directory, ["b.svg", "a.svg"])
    write_icons(directory, ["c-1.svg"], svg=CIRCLE_SVG)
    return directory


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Output directory path (not created)."""
    return tmp_path / "icons"
