"""Tests for the tilelayout.wrap module."""

import pytest

from tilelayout import Tile, tile_wrap, wrap_coordinate


class TestTileWrap:
    """Tests for the tile_wrap function."""

    def test_documented_examples(self):
        """tile_wrap should fold negative columns to the positive residue."""
        assert tile_wrap((-1, 0, 1)) == (1, 0, 1)
        assert tile_wrap((-1, 0, 2)) == (3, 0, 2)

    def test_returns_tile(self):
        """tile_wrap should return a Tile namedtuple."""
        result = tile_wrap([5, 6, 2])
        assert isinstance(result, Tile)
        assert (result.x, result.y, result.z) == (1, 2, 2)

    @pytest.mark.parametrize("z", range(5))
    def test_in_range_is_unchanged(self, z):
        """Coordinates inside the world tile should not move."""
        n = 2 ** z
        for x in range(n):
            for y in range(n):
                assert tile_wrap((x, y, z)) == (x, y, z)

    @pytest.mark.parametrize("z", range(5))
    @pytest.mark.parametrize("x", [-17, -4, -1, 0, 3, 9, 100])
    def test_periodic(self, x, z):
        """Shifting by a whole world should not change the wrapped tile."""
        n = 2 ** z
        assert tile_wrap((x, 0, z)) == tile_wrap((x + n, 0, z))
        assert tile_wrap((0, x, z)) == tile_wrap((0, x - n, z))

    def test_wraps_y(self):
        """Rows should wrap the same way as columns."""
        assert tile_wrap((0, -3, 2)) == (0, 1, 2)
        assert tile_wrap((0, 9, 3)) == (0, 1, 3)

    def test_zoom_zero(self):
        """At zoom 0 every tile wraps to the world tile."""
        assert tile_wrap((-7, 12, 0)) == (0, 0, 0)

    def test_negative_zoom_raises(self):
        """A negative zoom level should be rejected."""
        with pytest.raises(ValueError):
            tile_wrap((0, 0, -1))

    def test_wrap_coordinate_alias(self):
        """wrap_coordinate should be the same function as tile_wrap."""
        assert wrap_coordinate is tile_wrap
