"""Shared fixtures for pack_diagnostic tests."""

from pathlib import Path

import pytest
from PIL import Image

from pack_diagnostic.core.patterns import Patterns


@pytest.fixture
def patterns() -> Patterns:
    return Patterns.compile()


@pytest.fixture
def make_image():
    """Return a function writing a blank PNG of the given size."""

    def _make_image(path: Path, width: int, height: int) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new("RGBA", (width, height)).save(path, format="PNG")
        return path

    return _make_image


@pytest.fixture
def write_file():
    """Return a function writing a text file, creating parent directories."""

    def _write_file(path: Path, content: str = "") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write_file
