"""
Pytest configuration and shared fixtures for RGBA Composer tests.

This module provides shared test fixtures and configuration
used across multiple test modules.
"""

import pytest
from PIL import Image

from RC_Libs.SettingsLib.settings_store import ComposerSettings, MemorySettingsStore


# 2x2 source image, pixel values keyed by (x, y)
SAMPLE_PIXELS = {
    (0, 0): (10, 20, 30, 40),
    (1, 0): (50, 60, 70, 80),
    (0, 1): (90, 100, 110, 120),
    (1, 1): (130, 140, 150, 255),
}


def write_rgba_image(path, pixels, size):
    """
    Write an RGBA PNG with explicit pixel values.

    Args:
        path: Destination file
        pixels: Dict mapping (x, y) -> (r, g, b, a)
        size: (width, height)

    Returns:
        The path written
    """
    image = Image.new("RGBA", size)
    access = image.load()
    for (x, y), value in pixels.items():
        access[x, y] = value
    image.save(path, format="PNG")
    return path


@pytest.fixture
def sample_pixels():
    return dict(SAMPLE_PIXELS)


@pytest.fixture
def sample_image_path(tmp_path):
    """A 2x2 RGBA PNG holding SAMPLE_PIXELS."""
    return write_rgba_image(tmp_path / "sample.png", SAMPLE_PIXELS, (2, 2))


@pytest.fixture
def other_size_image_path(tmp_path):
    """A 3x1 RGBA PNG, used to provoke size mismatches."""
    pixels = {(x, 0): (x, x, x, 255) for x in range(3)}
    return write_rgba_image(tmp_path / "wide.png", pixels, (3, 1))


@pytest.fixture
def settings():
    """ComposerSettings over an empty in-memory store."""
    return ComposerSettings(MemorySettingsStore())
