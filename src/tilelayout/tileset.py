"""Tile coordinates and the result of a layout computation."""

from collections import namedtuple
from dataclasses import dataclass, field, replace
from typing import Tuple

Tile = namedtuple("Tile", ["x", "y", "z"])


@dataclass(frozen=True)
class TileSet:
    """Ordered, read-only collection of visible tiles.

    Together with an individual tile's ``x`` and ``y``, ``scale`` and
    ``translate`` give the intended location of the tile in the viewport
    (see :meth:`position`).

    Attributes
    ----------
    tiles : tuple of Tile
        Visible tiles, nearest to the viewport center first.
    scale : float
        Width and height in pixels of one tile at ``zoom``.
    translate : tuple of float
        Top-left corner of the world tile ``(0, 0, 0)`` in tile units.
    zoom : int
        Zoom level shared by all tiles.
    """

    tiles: Tuple[Tile, ...] = field(default_factory=tuple)
    scale: float = 0.0
    translate: Tuple[float, float] = (0.0, 0.0)
    zoom: int = 0

    def __len__(self):
        return len(self.tiles)

    def __iter__(self):
        return iter(self.tiles)

    def __getitem__(self, index):
        return self.tiles[index]

    def __contains__(self, tile):
        return tuple(tile) in self.tiles

    def position(self, tile) -> Tuple[float, float]:
        """Return the top-left pixel coordinates of a tile in the viewport.

        Parameters
        ----------
        tile : sequence of int
            Tile coordinates ``(x, y, z)``; only ``x`` and ``y`` are used.

        Returns
        -------
        tuple of float
            ``((x + tx) * scale, (y + ty) * scale)``.
        """
        x, y = tile[0], tile[1]
        tx, ty = self.translate
        return ((x + tx) * self.scale, (y + ty) * self.scale)

    def wrapped(self) -> "TileSet":
        """Return a copy with every tile folded into the world tile.

        The wrapped coordinates identify which image to load; placement
        in the viewport still follows the unwrapped tiles of ``self``.
        """
        from .wrap import tile_wrap
        return replace(self, tiles=tuple(tile_wrap(t) for t in self.tiles))
