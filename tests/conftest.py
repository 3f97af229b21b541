"""Shared pytest fixtures for tilelayout tests."""

from types import SimpleNamespace

import pytest

from tilelayout import TileLayout


@pytest.fixture
def layout():
    """Provide a tile layout with the default settings."""
    return TileLayout()


@pytest.fixture
def root_transform():
    """Provide a transform showing the world tile at native size with its
    center at the origin of the viewport."""
    return SimpleNamespace(k=256, x=0, y=0)


@pytest.fixture
def centered_transform():
    """Provide a zoom-1 transform centering the world in a 960x500 viewport."""
    return SimpleNamespace(k=512, x=480, y=250)


@pytest.fixture
def sample_settings():
    """Provide sample layout settings as a plain mapping."""
    return {
        "size": [512, 512],
        "tile_size": 512,
        "zoom_delta": 1,
        "clamp_x": False,
    }
