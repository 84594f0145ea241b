from __future__ import annotations

import io
from pathlib import Path

import pytest
from PIL import Image

from resgen.reporting import PlainReporter, set_reporter, set_verbosity


@pytest.fixture(autouse=True)
def _quiet_reporter():
    """Route reporter output to a buffer and reset verbosity per test."""
    stream = io.StringIO()
    set_reporter(PlainReporter(stream=stream, use_color=False))
    set_verbosity(0)
    yield stream
    set_verbosity(0)


@pytest.fixture
def make_image(tmp_path: Path):
    """Factory writing a gradient test image and returning its path."""

    def _make(
        name: str,
        width: int,
        height: int,
        fmt: str = "PNG",
        mode: str = "RGBA",
    ) -> Path:
        img = Image.linear_gradient("L").resize((width, height))
        img = img.convert(mode if fmt == "PNG" else "RGB")
        path = tmp_path / name
        img.save(path, format=fmt)
        return path

    return _make


@pytest.fixture
def icon_png(make_image) -> Path:
    return make_image("icon.png", 1024, 1024)
